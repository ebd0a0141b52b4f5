"""Comment extraction for protogql.

This module builds the path-to-comment map used to document converted types
from a compiled descriptor set's source info.
"""

from __future__ import annotations

from .extractor import (
    comments_from_descriptor_set,
    comments_from_file,
    comments_from_file_proto,
    format_comment,
)

__all__ = [
    "comments_from_descriptor_set",
    "comments_from_file",
    "comments_from_file_proto",
    "format_comment",
]
