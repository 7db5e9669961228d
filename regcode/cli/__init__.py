# regcode/cli/__init__.py
"""
RegCode CLI 模块入口。
"""

from regcode.cli.main import app

__all__ = ["app"]
