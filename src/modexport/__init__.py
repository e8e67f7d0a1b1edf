"""modexport：按可见性登记函数并组装模块导出对象"""

from .config import ExporterSettings, load_settings
from .exporter import (
    CLIENT_BUCKET,
    TEST_BUCKET,
    ExportBuilder,
    ExportNamespace,
)
from .introspect import (
    client_exports,
    describe,
    is_constructible,
    private_exports,
    public_names,
)
from .schemas import ExportManifest, Visibility

__all__ = [
    "ExportBuilder",
    "ExportNamespace",
    "ExportManifest",
    "ExporterSettings",
    "Visibility",
    "load_settings",
    "client_exports",
    "private_exports",
    "public_names",
    "describe",
    "is_constructible",
    "TEST_BUCKET",
    "CLIENT_BUCKET",
]
