from __future__ import annotations

from .config import ExporterSettings


def trace(settings: ExporterSettings, message: str) -> None:
    if settings.trace:
        print(f"[ModExport] {message}")
