#!/usr/bin/env python3
"""GraphQL schema example for protogql.

This example demonstrates:
1. Extracting comments from a compiled descriptor set
2. Converting messages and enums into GraphQL types
3. Assembling the converted types into a schema

Create the descriptor set first:
    protoc --include_imports --include_source_info \\
        --descriptor_set_out=shop.desc shop.proto
"""

from __future__ import annotations

import sys
from pathlib import Path

from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, print_schema

from protogql import (
    ConversionContext,
    ConverterOptions,
    build_pool,
    comments_from_descriptor_set,
    convert,
    parse_descriptor_set,
)


def main() -> None:
    """Run the GraphQL schema example."""
    if len(sys.argv) != 3:
        print("Usage: graphql_schema.py DESCRIPTOR_SET MESSAGE_FULL_NAME")
        sys.exit(1)

    data = Path(sys.argv[1]).read_bytes()
    pool = build_pool(parse_descriptor_set(data))

    # One context per schema build
    options = ConverterOptions(comment_separator=" ")
    context = ConversionContext(comments_from_descriptor_set(data, options), options)

    message = pool.FindMessageTypeByName(sys.argv[2])
    root_type = convert(message, context=context)

    query = GraphQLObjectType("Query", {"get": GraphQLField(root_type)})
    schema = GraphQLSchema(query=query)

    print(f"Converted {len(context.types)} types from {sys.argv[1]}")
    print()
    print(print_schema(schema))


if __name__ == "__main__":
    main()
