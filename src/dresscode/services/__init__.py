"""Services built on top of the color engine."""

from .export import (
    BaseExporter,
    CSSExporter,
    DesignSettings,
    ExportFormat,
    ExportManager,
    JSONExporter,
    SCSSExporter,
    TailwindExporter,
    export_theme,
)

__all__ = [
    "BaseExporter",
    "CSSExporter",
    "DesignSettings",
    "ExportFormat",
    "ExportManager",
    "JSONExporter",
    "SCSSExporter",
    "TailwindExporter",
    "export_theme",
]
