# regcode/cli/main.py
"""RegCode CLI 的主入口点。"""

from typing import Annotated, NoReturn, Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

import regcode
from regcode._ident.datecode import to_utc
from regcode._ident.normalizers import normalize_name
from regcode.cli.utils import parse_instant
from regcode.config import load_config
from regcode.exceptions import RegCodeError
from regcode.generator import generate_identifier_components
from regcode.logging_config import setup_logging

log = structlog.get_logger("regcode.cli")

app = typer.Typer(
    name="regcode",
    help="🔖 RegCode: 从名称与注册时刻合成紧凑、可读的客户标识符。",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

NameArgument = Annotated[str, typer.Argument(help="实体的显示名称。")]
AtOption = Annotated[
    Optional[str],
    typer.Option(
        "--at",
        "-a",
        help="注册时刻 (ISO 8601，例如 2006-01-02T00:00:00.010Z)；默认为当前 UTC 时刻。",
    ),
]


def version_callback(value: bool) -> None:
    """处理 --version 选项的回调函数。"""
    if value:
        console.print(f"RegCode [bold cyan]v{regcode.__version__}[/bold cyan]")
        raise typer.Exit()


def _fail(error: Exception) -> NoReturn:
    log.warning("命令执行失败", error=str(error))
    console.print(f"[red]❌ 命令执行失败: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="显示版本信息并退出。",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    主回调函数，在任何子命令执行前运行：加载配置并初始化日志。
    """
    try:
        config = load_config()
        setup_logging(log_level=config.logging.level, log_format=config.logging.format)
        ctx.obj = config
    except Exception as e:
        console.print("[bold red]❌ 启动失败：无法加载配置或初始化日志。[/bold red]")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(code=1) from e


@app.command()
def generate(name: NameArgument, at: AtOption = None) -> None:
    """为名称生成标识符。"""
    try:
        components = generate_identifier_components(name, parse_instant(at))
    except (RegCodeError, typer.BadParameter) as e:
        _fail(e)
    else:
        console.print(components.identifier, highlight=False)


@app.command()
def normalize(name: NameArgument) -> None:
    """显示名称的规范形式 (大写、仅字母)。"""
    try:
        canonical = normalize_name(name)
    except RegCodeError as e:
        _fail(e)
    else:
        console.print(canonical, highlight=False)


@app.command()
def explain(name: NameArgument, at: AtOption = None) -> None:
    """以表格形式展示标识符的各个组成部分。"""
    try:
        instant = parse_instant(at)
        components = generate_identifier_components(name, instant)
    except (RegCodeError, typer.BadParameter) as e:
        _fail(e)

    table = Table(title=f"标识符: {components.identifier}", show_header=True)
    table.add_column("组件", style="cyan")
    table.add_column("值", style="bold")
    table.add_row("名称", name)
    table.add_row("规范名称", normalize_name(name))
    table.add_row("注册时刻 (UTC)", to_utc(instant).isoformat(timespec="milliseconds"))
    table.add_row("前缀", components.prefix)
    table.add_row("日期码", components.date_code)
    table.add_row("熵尾部", components.entropy_tail)
    console.print(table)


if __name__ == "__main__":
    app()
