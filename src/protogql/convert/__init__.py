"""Descriptor to GraphQL type conversion for protogql.

This module provides the converters for output object types, enum types and
input object types, and the context that caches them during one schema build.
"""

from __future__ import annotations

from .context import ConversionContext
from .converter import convert, convert_enum, convert_file
from .inputs import convert_input
from .scalars import SCALAR_TYPES, scalar_type

__all__ = [
    "ConversionContext",
    "convert",
    "convert_enum",
    "convert_file",
    "convert_input",
    "SCALAR_TYPES",
    "scalar_type",
]
