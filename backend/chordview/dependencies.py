"""FastAPI dependency injection."""

from __future__ import annotations

from chordview.config import Settings, settings
from chordview.engine.config import LayoutConfig


def get_settings() -> Settings:
    return settings


def get_layout_config() -> LayoutConfig:
    return LayoutConfig(pad_angle=settings.pad_angle)
