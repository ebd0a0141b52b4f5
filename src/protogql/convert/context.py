"""Per-build conversion state."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from graphql import GraphQLNamedType

from ..config import DEFAULT_OPTIONS, ConverterOptions
from ..exceptions import SchemaError

logger = logging.getLogger(__name__)


class ConversionContext:
    """State shared by all conversions of one schema build.

    The context caches every converted type by reference name, so a descriptor
    referenced from several fields (or from itself) converts to a single type
    instance. Create one context per build; contexts are not thread-safe.

    Attributes:
        comments: Mapping from fully-qualified element name to documentation
        options: Converter options
        types: Converted types keyed by GraphQL name

    Example:
        >>> context = ConversionContext(comments)
        >>> first = convert(Proto1.DESCRIPTOR, context=context)
        >>> convert(Proto1.DESCRIPTOR, context=context) is first
        True
    """

    def __init__(
        self,
        comments: Optional[Mapping[str, str]] = None,
        options: ConverterOptions = DEFAULT_OPTIONS,
    ) -> None:
        self.comments: Mapping[str, str] = comments if comments is not None else {}
        self.options = options
        self.types: dict[str, GraphQLNamedType] = {}
        self._origins: dict[str, str] = {}
        self._pending: Optional[list[str]] = None

    def description(self, full_name: str) -> Optional[str]:
        """Return the comment for an element, or None when it has none."""
        return self.comments.get(full_name) or None

    def _check_origin(self, name: str, full_name: str) -> None:
        origin = self._origins.get(name)
        if origin is not None and origin != full_name:
            raise SchemaError(f"{full_name} and {origin} both map to GraphQL type {name}")

    def lookup(self, name: str, full_name: str) -> Optional[GraphQLNamedType]:
        """Return the type already converted from ``full_name`` under ``name``.

        Args:
            name: GraphQL type name
            full_name: Fully-qualified name of the descriptor being converted

        Returns:
            The cached type, or None when nothing is cached under ``name``

        Raises:
            SchemaError: If ``name`` was produced by a different descriptor
        """
        self._check_origin(name, full_name)
        cached = self.types.get(name)
        if cached is not None:
            logger.debug("Reusing converted type %s", name)
        return cached

    def register(self, name: str, full_name: str, graphql_type: GraphQLNamedType) -> None:
        """Cache a type, possibly before its fields are built.

        Args:
            name: GraphQL type name
            full_name: Fully-qualified name of the source descriptor
            graphql_type: Type to cache

        Raises:
            SchemaError: If ``name`` was produced by a different descriptor
        """
        self._check_origin(name, full_name)
        self._origins[name] = full_name
        self.types[name] = graphql_type
        if self._pending is not None:
            self._pending.append(name)

    def discard(self, name: str) -> None:
        """Drop a type whose construction failed."""
        self.types.pop(name, None)
        self._origins.pop(name, None)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Roll back every type registered inside the block if it raises.

        Nested blocks join the outermost one, so a failure anywhere in a
        recursive conversion removes all types that conversion created.
        """
        outermost = self._pending is None
        if outermost:
            self._pending = []
        try:
            yield
        except Exception:
            if outermost and self._pending is not None:
                for name in self._pending:
                    self.discard(name)
                logger.debug("Rolled back %d types after failed conversion", len(self._pending))
            raise
        finally:
            if outermost:
                self._pending = None
