"""Converter configuration.

This module provides ConverterOptions, the immutable set of knobs shared by the
comment extractor and the descriptor converters. The defaults reproduce the
naming and documentation rules used for compiled descriptor sets.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_GRAPHQL_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class ConverterOptions(BaseModel):
    """Options controlling naming and documentation of converted types.

    Attributes:
        comment_separator: Text placed between a leading and a trailing comment
            of the same element (default a single space).
        field_renames: Output field names keyed by fully-qualified proto field
            name (e.g. ``"pkg.Message.some_field"``). A rename always wins over
            json_name and the camelCase default.
        honor_json_name: Use an explicit ``json_name`` field option as the
            output name when it differs from the camelCase default.
        input_prefix: Prefix of input object type names.

    Example:
        >>> options = ConverterOptions(field_renames={"shop.Item.sku_id": "SKU"})
        >>> options.comment_separator
        ' '
    """

    model_config = ConfigDict(
        # Options are shared by every conversion of a build pass
        frozen=True,
        # Catch misspelled option names
        extra="forbid",
    )

    comment_separator: str = " "
    field_renames: dict[str, str] = Field(default_factory=dict)
    honor_json_name: bool = True
    input_prefix: str = "Input_"

    @field_validator("field_renames")
    @classmethod
    def _check_renames(cls, value: dict[str, str]) -> dict[str, str]:
        for full_name, target in value.items():
            if not _GRAPHQL_NAME.match(target):
                raise ValueError(f"Rename of {full_name} to {target!r} is not a valid GraphQL name")
        return value

    @field_validator("input_prefix")
    @classmethod
    def _check_input_prefix(cls, value: str) -> str:
        if not _GRAPHQL_NAME.match(value):
            raise ValueError(f"input_prefix must start a valid GraphQL name, got {value!r}")
        return value


DEFAULT_OPTIONS = ConverterOptions()
