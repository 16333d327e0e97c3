# Copyright 2019-present Kensho Technologies, LLC.
from typing import NamedTuple

from graphql.error import GraphQLSyntaxError
from graphql.language.ast import (
    DocumentNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    TypeNode,
)
from graphql.language.parser import parse

from .exceptions import ConfigParsingError, ConfigStructureError


class UnwrappedType(NamedTuple):
    """A type reference split into its named type and its list and non-null wrappers."""

    type_name: str
    is_list: bool
    required: bool
    list_type_required: bool


def safe_parse_graphql(graphql_string: str) -> DocumentNode:
    """Return an AST representation of the given GraphQL input, reraising GraphQL library errors."""
    try:
        ast = parse(graphql_string)
    except GraphQLSyntaxError as e:
        raise ConfigParsingError(e) from e

    return ast


def get_ast_with_non_null_stripped(ast: TypeNode) -> TypeNode:
    """Strip a NonNullType layer around the AST if there is one, return the underlying AST."""
    if isinstance(ast, NonNullTypeNode):
        stripped_ast = ast.type
        if isinstance(stripped_ast, NonNullTypeNode):
            raise AssertionError(
                "NonNullType is unexpectedly found to wrap around another NonNullType in AST "
                "{}, which is not allowed.".format(ast)
            )
        return stripped_ast
    else:
        return ast


def get_ast_with_non_null_and_list_stripped(ast: TypeNode) -> NamedTypeNode:
    """Strip any NonNullType or List layers around the AST, return the underlying AST."""
    while isinstance(ast, (NonNullTypeNode, ListTypeNode)):
        ast = ast.type
    if not isinstance(ast, NamedTypeNode):
        raise AssertionError(f"Expected a NamedTypeNode at the core of a type AST, got {ast}.")
    return ast


def unwrap_type_ast(ast: TypeNode) -> UnwrappedType:
    """Split a type reference like "[B!]!" into its named type and its wrapper flags.

    Raises:
        - ConfigStructureError if the reference nests a list inside a list, e.g. "[[B]]"
    """
    required = isinstance(ast, NonNullTypeNode)
    ast = get_ast_with_non_null_stripped(ast)

    is_list = isinstance(ast, ListTypeNode)
    list_type_required = False
    if isinstance(ast, ListTypeNode):
        list_type_required = isinstance(ast.type, NonNullTypeNode)
        if isinstance(get_ast_with_non_null_stripped(ast.type), ListTypeNode):
            raise ConfigStructureError(
                "Encountered a list type nested inside another list type, which cannot be "
                "represented in a configuration."
            )

    named_type = get_ast_with_non_null_and_list_stripped(ast)
    return UnwrappedType(
        type_name=named_type.name.value,
        is_list=is_list,
        required=required,
        list_type_required=list_type_required,
    )
