"""Data models for pdftool."""

from pdftool.models.config import StructureConfig
from pdftool.models.structure import ClassifiedLine, Line, LineClass, PageSelection

__all__ = [
    "ClassifiedLine",
    "Line",
    "LineClass",
    "PageSelection",
    "StructureConfig",
]
