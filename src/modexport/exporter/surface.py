"""
导出对象组装 - Export Surface Assembly

将三个登记分组与可选主构造器组装为最终导出对象。
Assemble the three registration buckets and the optional primary constructor
into the final export object.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from weakref import WeakKeyDictionary

TEST_BUCKET = "__test"
CLIENT_BUCKET = "__exportsToClient"
RESERVED_BUCKETS = (TEST_BUCKET, CLIENT_BUCKET)

# 主构造器 -> 最近一次组装时挂上的公开名称
_ATTACHED_NAMES: "WeakKeyDictionary[Any, Tuple[str, ...]]" = WeakKeyDictionary()


class ExportNamespace(SimpleNamespace):
    """未设置主构造器时返回的普通导出对象"""

    def __getitem__(self, name: str) -> Any:
        try:
            return getattr(self, name)
        except AttributeError:
            raise KeyError(name) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in vars(self)

    def to_dict(self) -> Dict[str, Any]:
        return dict(vars(self))


def assemble_surface(
    public_entries: Mapping[str, Callable],
    test_entries: Mapping[str, Callable],
    client_entries: Mapping[str, Callable],
    primary_constructor: Optional[Callable] = None,
) -> Any:
    """
    组装导出对象 - Assemble Export Surface

    步骤 Steps:
    1. 有主构造器时以其本身为基础对象，否则新建空 ExportNamespace
    2. 将公开函数逐个设置为基础对象的属性
    3. 写入 __test 分组（普通 dict 副本）
    4. 写入 __exportsToClient 分组（普通 dict 副本）

    保留分组总在公开函数之后写入，同名公开函数会被覆盖。
    Reserved buckets are written after the public merge, so a public entry
    with the same name is always overwritten.

    返回 Returns:
        主构造器本身或 ExportNamespace
        The primary constructor itself, or an ExportNamespace
    """
    base: Any = primary_constructor if primary_constructor is not None else ExportNamespace()

    for name, fn in public_entries.items():
        setattr(base, name, fn)

    setattr(base, TEST_BUCKET, dict(test_entries))
    setattr(base, CLIENT_BUCKET, dict(client_entries))

    if primary_constructor is not None:
        try:
            _ATTACHED_NAMES[base] = tuple(n for n in public_entries if n not in RESERVED_BUCKETS)
        except TypeError:
            pass  # 不支持弱引用的可调用对象，public_names 退回到 vars()
    return base


def attached_names(exports: Any) -> Optional[Tuple[str, ...]]:
    """主构造器形式下，返回组装时挂上的公开名称；未记录时返回 None"""
    try:
        return _ATTACHED_NAMES.get(exports)
    except TypeError:
        # 不可哈希或不支持弱引用的对象（如 ExportNamespace）
        return None
