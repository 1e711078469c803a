"""Hive management use cases: hives and hive sections."""

from .dtos import (
    Hive,
    HiveListItem,
    HiveSection,
    HiveSectionListItem,
    UpdateHiveRequest,
    UpdateHiveSectionRequest,
)
from .hive_service import HIVE_BINDING, HiveService
from .hive_section_service import HIVE_SECTION_BINDING, HiveSectionService

__all__ = [
    "HiveService",
    "HiveSectionService",
    "HIVE_BINDING",
    "HIVE_SECTION_BINDING",
    "Hive",
    "HiveListItem",
    "UpdateHiveRequest",
    "HiveSection",
    "HiveSectionListItem",
    "UpdateHiveSectionRequest",
]
