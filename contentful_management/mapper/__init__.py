"""Conversion of raw JSON fragments into typed resources."""

from contentful_management.mapper.asset import map_file
from contentful_management.mapper.base import Mapper, system_properties
from contentful_management.mapper.content_type import map_field, map_validation
from contentful_management.mapper.registry import MapperRegistry, default_registry


__all__ = [
    "Mapper",
    "MapperRegistry",
    "default_registry",
    "map_field",
    "map_file",
    "map_validation",
    "system_properties",
]
