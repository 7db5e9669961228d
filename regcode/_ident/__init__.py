# regcode/_ident/__init__.py
"""
标识符合成 (Identifier Synthesis) 模块。

本模块中的每个阶段都是纯函数：名称归一化、辅音前缀组合、日历编码与
毫秒熵编码。它们没有共享状态，也不做任何 I/O，可在任意并发环境中直接调用。
"""
