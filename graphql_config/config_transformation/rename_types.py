# Copyright 2020-present Kensho Technologies, LLC.
"""Rename types of a configuration, updating every reference to them.

Given the following part of a configuration:
    schema {
        query: Query
    }
    type User {
        name: String
    }
    type Query {
        user(id: ID!): User
    }
renaming "User" to "Person" and "Query" to "UserQuery" produces a configuration in which the
Person type sits where User used to be, the UserQuery type sits where Query used to be, the
schema's query root is UserQuery, and the "user" field of UserQuery is of type Person.

Renamings only apply to types that exist in the original configuration, and are all applied
"simultaneously" against the original names. For example, if a configuration contains types
"Foo" and "Bar" and the renamings map "Foo" to "Bar" and "Bar" to "Baz", the renamed
configuration contains a type "Bar" (the original "Foo") and a type "Baz" (the original "Bar"),
and references to the original "Foo" point to "Bar" rather than cascading on to "Baz".

Renaming constraints:
- Every renamed type must exist in the configuration. Every renaming of a nonexistent type is
  reported, in renaming order, and nothing is renamed if there is at least one such renaming.

Known sharp edges, which are accepted rather than reported:
- Renaming a type to the name of an existing type that is not itself renamed replaces the
  existing type's definition with the renamed one.
- Renaming two types to the same name keeps only the definition of the type whose renaming
  comes last, at the position of whichever of the two was defined first. References to either
  original type point to the shared new name.
"""
from copy import deepcopy
from functools import partial
import logging
from typing import Dict, Iterable, Mapping, Tuple, Union

from ..config import Config, RootSchema, Type
from ..valid import Valid
from .base import Transform


logger = logging.getLogger(__name__)

TypeRenamingsT = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _check_type_exists(config: Config, type_name: str) -> Valid[None, str]:
    """Succeed iff the configuration defines a type with the given name."""
    if type_name not in config.types:
        return Valid.fail(f"Type '{type_name}' not found in configuration.")
    return Valid.succeed(None)


class RenameTypes(Transform[Config, str]):
    """Transform renaming existing types of a Config to the suggested names."""

    def __init__(self, suggested_names: TypeRenamingsT) -> None:
        """Store the renamings, which may be a mapping or an iterable of (old, new) pairs.

        If the same original name appears more than once, the last suggested name is used.
        """
        self.suggested_names: Dict[str, str] = dict(suggested_names)

    def transform(self, config: Config) -> Valid[Config, str]:
        """Return a renamed copy of the configuration, or one error per unknown type name.

        The input configuration is never modified.
        """
        existence_check = Valid.from_iter(self.suggested_names, partial(_check_type_exists, config))
        if existence_check.is_fail:
            logger.info(
                "Refusing to rename types: %(num_missing)s of %(num_renamings)s renamed types "
                "are not in the configuration.",
                {
                    "num_missing": len(existence_check.errors),
                    "num_renamings": len(self.suggested_names),
                },
            )
        return existence_check.map(lambda _: self._apply_renamings(config))

    def _apply_renamings(self, config: Config) -> Config:
        """Rename type definitions, schema roots and type references, on a copy of config.

        Every renamed type must be known to exist in the configuration.
        """
        renamed_config = deepcopy(config)
        renamed_config.types = _rename_type_definitions(renamed_config.types, self.suggested_names)
        _rename_schema_roots(renamed_config.schema, self.suggested_names)
        _rename_type_references(renamed_config.types, self.suggested_names)

        logger.debug("Renamed %s types.", len(self.suggested_names))
        return renamed_config


def rename_types(config: Config, suggested_names: TypeRenamingsT) -> Config:
    """Return a copy of the configuration with types renamed to the suggested names.

    Args:
        config: configuration to rename types of. Not modified by this function
        suggested_names: maps original type names to their new names, either as a mapping or as
                         an iterable of (original_name, new_name) pairs

    Returns:
        renamed copy of config, in which every field, argument and schema root that referred to
        a renamed type refers to its new name instead

    Raises:
        - ConfigValidationError if suggested_names renames types that don't exist in config.
          Its errors attribute holds one message per such type
    """
    return RenameTypes(suggested_names).transform(config).to_result()


def _rename_type_definitions(
    types: Dict[str, Type], renamings: Mapping[str, str]
) -> Dict[str, Type]:
    """Return the types keyed by their new names, each at the position of its original name.

    When several types end up with the same name, the name takes the position of the first of
    them and the definition of the one whose renaming comes last.
    """
    # Renamed definitions win over the definition of a non-renamed type with the same name.
    surviving_original_names = {
        new_name: original_name for original_name, new_name in renamings.items()
    }

    renamed_types: Dict[str, Type] = {}
    for type_name in types:
        new_name = renamings.get(type_name, type_name)
        if new_name not in renamed_types:
            renamed_types[new_name] = types[surviving_original_names.get(new_name, type_name)]
    return renamed_types


def _rename_schema_roots(schema: RootSchema, renamings: Mapping[str, str]) -> None:
    """Point every root operation type that was renamed to its new name, in place."""
    if schema.query is not None:
        schema.query = renamings.get(schema.query, schema.query)
    if schema.mutation is not None:
        schema.mutation = renamings.get(schema.mutation, schema.mutation)
    if schema.subscription is not None:
        schema.subscription = renamings.get(schema.subscription, schema.subscription)


def _rename_type_references(types: Dict[str, Type], renamings: Mapping[str, str]) -> None:
    """Point every field and argument of a renamed type to the type's new name, in place."""
    for type_info in types.values():
        for field_info in type_info.fields.values():
            field_info.type_of = renamings.get(field_info.type_of, field_info.type_of)
            for arg_info in field_info.args.values():
                arg_info.type_of = renamings.get(arg_info.type_of, arg_info.type_of)
