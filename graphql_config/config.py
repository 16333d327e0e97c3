# Copyright 2020-present Kensho Technologies, LLC.
"""Data model of a GraphQL configuration: named types, their fields, and the schema roots.

All name-keyed collections are plain dicts, whose insertion order is significant: it is the
order in which types, fields and arguments were defined, and transforms preserve it.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple


@dataclass
class Arg:
    """An argument of a field.

    type_of is the bare name of the argument's type, with list and non-null wrappers recorded
    separately: an argument declared as "user: [B!]" has type_of "B", list=True, required=False
    and list_type_required=True.
    """

    type_of: str
    list: bool = False
    required: bool = False
    list_type_required: bool = False
    doc: Optional[str] = None


@dataclass
class Field:
    """A field of a type, with its arguments.

    list_type_required is only meaningful when list is True, and records whether the items of
    the list are non-null: "[B!]!" has list=True, required=True, list_type_required=True.
    """

    type_of: str
    list: bool = False
    required: bool = False
    list_type_required: bool = False
    args: Dict[str, Arg] = field(default_factory=dict)
    doc: Optional[str] = None


@dataclass
class Type:
    """A named type definition: an object type, interface, input object or custom scalar."""

    fields: Dict[str, Field] = field(default_factory=dict)
    doc: Optional[str] = None
    interface: bool = False
    input: bool = False


@dataclass
class RootSchema:
    """The names of the schema's root operation types, each unset or naming a configured type."""

    query: Optional[str] = None
    mutation: Optional[str] = None
    subscription: Optional[str] = None


@dataclass
class Config:
    """A whole GraphQL configuration."""

    types: Dict[str, Type] = field(default_factory=dict)
    schema: RootSchema = field(default_factory=RootSchema)

    def iter_type_references(self) -> Iterator[Tuple[str, str, Optional[str], str]]:
        """Yield every type reference made by a field or argument.

        Each item is a (type_name, field_name, arg_name, referenced_type_name) tuple, with
        arg_name None for the field's own type. Items are produced in definition order.
        """
        for type_name, type_info in self.types.items():
            for field_name, field_info in type_info.fields.items():
                yield type_name, field_name, None, field_info.type_of
                for arg_name, arg_info in field_info.args.items():
                    yield type_name, field_name, arg_name, arg_info.type_of
