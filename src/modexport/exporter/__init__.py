"""Exporter 模块：函数登记与导出对象组装"""

from .naming import intrinsic_name, resolve_name
from .registry import ExportBuilder
from .surface import (
    CLIENT_BUCKET,
    RESERVED_BUCKETS,
    TEST_BUCKET,
    ExportNamespace,
    assemble_surface,
    attached_names,
)

__all__ = [
    "ExportBuilder",
    "ExportNamespace",
    "assemble_surface",
    "attached_names",
    "intrinsic_name",
    "resolve_name",
    "TEST_BUCKET",
    "CLIENT_BUCKET",
    "RESERVED_BUCKETS",
]
