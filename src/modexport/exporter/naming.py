"""
导出名称解析 - Export Name Resolution

所有登记操作共用的名称规则：显式名称优先，否则使用函数自身的 ``__name__``。
Naming rule shared by every registration: explicit name first, otherwise the
callable's own ``__name__``.
"""

from __future__ import annotations

from typing import Callable, Optional

_ANONYMOUS_NAMES = {"<lambda>"}


def intrinsic_name(fn: Callable) -> Optional[str]:
    """
    获取函数自身的声明名称 - Get Declared Name of a Callable

    lambda 与没有 ``__name__`` 的对象（如 functools.partial）视为匿名。
    Lambdas and objects without ``__name__`` (e.g. functools.partial) are anonymous.

    返回 Returns:
        声明名称，匿名时返回 None
        Declared name, or None when anonymous
    """
    name = getattr(fn, "__name__", None)
    if not isinstance(name, str) or not name or name in _ANONYMOUS_NAMES:
        return None
    return name


def resolve_name(fn: Callable, name: Optional[str] = None) -> Optional[str]:
    """
    解析有效导出名称 - Resolve Effective Export Name

    参数 Parameters:
        fn: 要登记的函数
            Callable being registered
        name: 可选的显式名称，空字符串视为未提供
              Optional explicit name, empty string counts as absent

    返回 Returns:
        有效名称，无法解析时返回 None
        Effective name, or None when it cannot be resolved
    """
    if name:
        return name
    return intrinsic_name(fn)
