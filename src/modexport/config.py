from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


@dataclass
class ExporterSettings:
    strict: bool = False
    trace: bool = False

    @classmethod
    def from_env(cls) -> "ExporterSettings":
        return cls(
            strict=_env_bool("MODEXPORT_STRICT", False),
            trace=_env_bool("MODEXPORT_TRACE", False),
        )


def load_settings(env_file: Path | str | None = None) -> ExporterSettings:
    """读取导出器配置（可选先加载 .env 文件）"""
    if env_file is not None:
        load_dotenv(Path(env_file))
    return ExporterSettings.from_env()
