# Copyright 2020-present Kensho Technologies, LLC.
"""Build a Config out of a GraphQL schema definition document.

Parsing is left to graphql-core; this module only translates the type system definitions of an
already-parsed document into the configuration data model:
- the schema definition, if present, provides the root operation type names;
- object types, interfaces, input objects and custom scalars become configured types;
- directive definitions, and directives applied to definitions, are ignored.
Any other definition cannot be represented and raises ConfigStructureError, as do repeated
definitions of the same type, field or argument, and lists nested inside lists.
"""
from typing import Dict, Optional, Sequence

from graphql.language.ast import (
    DirectiveDefinitionNode,
    DocumentNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    StringValueNode,
)

from .ast_manipulation import safe_parse_graphql, unwrap_type_ast
from .config import Arg, Config, Field, RootSchema, Type
from .exceptions import ConfigStructureError


def config_from_sdl(sdl: str) -> Config:
    """Parse the given schema definition language text and build a Config from it.

    Args:
        sdl: GraphQL schema definition text

    Returns:
        Config describing the types and schema roots defined by the text

    Raises:
        - ConfigParsingError if the text is not syntactically valid GraphQL
        - ConfigStructureError if the document contains definitions a Config cannot represent
    """
    return config_from_ast(safe_parse_graphql(sdl))


def config_from_ast(document: DocumentNode) -> Config:
    """Build a Config from a parsed GraphQL schema document. The document is not modified."""
    config = Config()
    schema_definition: Optional[SchemaDefinitionNode] = None

    for definition in document.definitions:
        if isinstance(definition, SchemaDefinitionNode):
            if schema_definition is not None:
                raise ConfigStructureError(
                    "Encountered multiple schema definitions within the document. This is not "
                    "supported."
                )
            schema_definition = definition
        elif isinstance(definition, DirectiveDefinitionNode):
            continue
        elif isinstance(
            definition,
            (
                ObjectTypeDefinitionNode,
                InterfaceTypeDefinitionNode,
                InputObjectTypeDefinitionNode,
                ScalarTypeDefinitionNode,
            ),
        ):
            type_name = definition.name.value
            if type_name in config.types:
                raise ConfigStructureError(
                    f'Encountered a second definition of type "{type_name}" within the '
                    f"document. Type names must be unique."
                )
            config.types[type_name] = _build_type(definition)
        else:
            raise ConfigStructureError(
                f"Encountered a {type(definition).__name__} within the document, which cannot "
                f"be represented in a configuration. Only a schema definition, directive "
                f"definitions, object types, interfaces, input objects and scalars are "
                f"supported."
            )

    if schema_definition is not None:
        config.schema = _build_root_schema(schema_definition)
    return config


def _get_description(node) -> Optional[str]:
    """Return the description text of a definition node, if it has one."""
    description = getattr(node, "description", None)
    if isinstance(description, StringValueNode):
        return description.value
    return None


def _build_root_schema(schema_definition: SchemaDefinitionNode) -> RootSchema:
    """Read the root operation type names out of a schema definition."""
    root_schema = RootSchema()
    for operation_type_definition in schema_definition.operation_types:
        # OperationType values are "query", "mutation" and "subscription", which are exactly
        # the attribute names of RootSchema.
        setattr(
            root_schema,
            operation_type_definition.operation.value,
            operation_type_definition.type.name.value,
        )
    return root_schema


def _build_type(definition) -> Type:
    """Build a Type out of an object, interface, input object or scalar definition."""
    fields: Dict[str, Field] = {}
    for field_definition in getattr(definition, "fields", None) or []:
        field_name = field_definition.name.value
        if field_name in fields:
            raise ConfigStructureError(
                f'Type "{definition.name.value}" defines field "{field_name}" more than once.'
            )
        fields[field_name] = _build_field(field_definition)

    return Type(
        fields=fields,
        doc=_get_description(definition),
        interface=isinstance(definition, InterfaceTypeDefinitionNode),
        input=isinstance(definition, InputObjectTypeDefinitionNode),
    )


def _build_field(field_definition) -> Field:
    """Build a Field out of an output field or an input object field definition."""
    unwrapped = unwrap_type_ast(field_definition.type)
    arguments: Sequence[InputValueDefinitionNode] = []
    if isinstance(field_definition, FieldDefinitionNode):
        arguments = field_definition.arguments or []

    args: Dict[str, Arg] = {}
    for argument in arguments:
        arg_name = argument.name.value
        if arg_name in args:
            raise ConfigStructureError(
                f'Field "{field_definition.name.value}" defines argument "{arg_name}" more than '
                f"once."
            )
        args[arg_name] = _build_arg(argument)

    return Field(
        type_of=unwrapped.type_name,
        list=unwrapped.is_list,
        required=unwrapped.required,
        list_type_required=unwrapped.list_type_required,
        args=args,
        doc=_get_description(field_definition),
    )


def _build_arg(argument: InputValueDefinitionNode) -> Arg:
    unwrapped = unwrap_type_ast(argument.type)
    return Arg(
        type_of=unwrapped.type_name,
        list=unwrapped.is_list,
        required=unwrapped.required,
        list_type_required=unwrapped.list_type_required,
        doc=_get_description(argument),
    )
