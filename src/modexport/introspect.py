"""
导出对象读取工具 - Export Surface Read Helpers

供测试代码与打包工具读取已组装导出对象的各个分组。
Let test code and packaging tooling read the buckets of an assembled surface.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from .exporter.naming import intrinsic_name
from .exporter.surface import CLIENT_BUCKET, RESERVED_BUCKETS, TEST_BUCKET, ExportNamespace, attached_names
from .schemas import ExportManifest


def is_constructible(exports: Any) -> bool:
    return callable(exports) and not isinstance(exports, ExportNamespace)


def private_exports(exports: Any) -> Dict[str, Callable]:
    return dict(getattr(exports, TEST_BUCKET, {}))


def client_exports(exports: Any) -> Dict[str, Callable]:
    """返回需要转发到客户端的函数"""
    return dict(getattr(exports, CLIENT_BUCKET, {}))


def public_names(exports: Any) -> List[str]:
    """
    列出公开导出名称 - List Public Export Names

    可直接用于模块的 ``__all__``。主构造器形式下只返回组装时挂上的名称，
    类体内定义的属性不计入。
    Suitable for a module's ``__all__``. For a constructible surface only the
    names attached by assembly are returned, never members of the class body.
    """
    recorded = attached_names(exports)
    if recorded is not None:
        return sorted(recorded)

    constructible = is_constructible(exports)
    names = []
    for name in vars(exports):
        if name in RESERVED_BUCKETS:
            continue
        if constructible and name.startswith("__") and name.endswith("__"):
            continue
        names.append(name)
    return sorted(names)


def describe(exports: Any) -> ExportManifest:
    constructible = is_constructible(exports)
    return ExportManifest(
        kind="constructible" if constructible else "plain",
        primary=intrinsic_name(exports) if constructible else None,
        public=public_names(exports),
        test=sorted(private_exports(exports)),
        client=sorted(client_exports(exports)),
    )
