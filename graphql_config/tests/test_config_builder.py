# Copyright 2020-present Kensho Technologies, LLC.
from textwrap import dedent
import unittest

from graphql import parse

from ..config import Arg, Config, Field, RootSchema, Type
from ..config_builder import config_from_ast, config_from_sdl
from ..exceptions import ConfigParsingError, ConfigStructureError


class TestConfigBuilder(unittest.TestCase):
    def test_basic_config(self) -> None:
        schema_string = dedent(
            """\
            schema {
              query: Query
              mutation: Mutation
            }

            type Human {
              id: ID!
              name: String
            }

            type Query {
              human(id: ID!): Human
            }

            type Mutation {
              createHuman(name: String): Human
            }
        """
        )
        expected_config = Config(
            types={
                "Human": Type(
                    fields={
                        "id": Field(type_of="ID", required=True),
                        "name": Field(type_of="String"),
                    }
                ),
                "Query": Type(
                    fields={
                        "human": Field(
                            type_of="Human", args={"id": Arg(type_of="ID", required=True)}
                        )
                    }
                ),
                "Mutation": Type(
                    fields={
                        "createHuman": Field(type_of="Human", args={"name": Arg(type_of="String")})
                    }
                ),
            },
            schema=RootSchema(query="Query", mutation="Mutation"),
        )
        self.assertEqual(expected_config, config_from_sdl(schema_string))

    def test_type_order_preserved(self) -> None:
        schema_string = dedent(
            """\
            type Zebra {
              name: String
            }

            type Aardvark {
              name: String
            }

            type Mongoose {
              name: String
            }
        """
        )
        config = config_from_sdl(schema_string)
        self.assertEqual(["Zebra", "Aardvark", "Mongoose"], list(config.types))

    def test_no_schema_definition(self) -> None:
        schema_string = dedent(
            """\
            type Query {
              name: String
            }
        """
        )
        config = config_from_sdl(schema_string)
        self.assertEqual(RootSchema(), config.schema)
        self.assertIn("Query", config.types)

    def test_subscription_root(self) -> None:
        schema_string = dedent(
            """\
            schema {
              query: Query
              subscription: Events
            }

            type Query {
              name: String
            }

            type Events {
              nameChanged: String
            }
        """
        )
        self.assertEqual(
            RootSchema(query="Query", subscription="Events"), config_from_sdl(schema_string).schema
        )

    def test_type_modifiers(self) -> None:
        schema_string = dedent(
            """\
            type Human {
              a: String
              b: String!
              c: [String]
              d: [String!]
              e: [String]!
              f: [String!]!
              h(first: [Int!]!, second: [Int], third: [Int!]): String
            }
        """
        )
        fields = config_from_sdl(schema_string).types["Human"].fields
        self.assertEqual(Field(type_of="String"), fields["a"])
        self.assertEqual(Field(type_of="String", required=True), fields["b"])
        self.assertEqual(Field(type_of="String", list=True), fields["c"])
        self.assertEqual(Field(type_of="String", list=True, list_type_required=True), fields["d"])
        self.assertEqual(Field(type_of="String", list=True, required=True), fields["e"])
        self.assertEqual(
            Field(type_of="String", list=True, required=True, list_type_required=True),
            fields["f"],
        )
        self.assertEqual(
            {
                "first": Arg(type_of="Int", list=True, required=True, list_type_required=True),
                "second": Arg(type_of="Int", list=True),
                "third": Arg(type_of="Int", list=True, list_type_required=True),
            },
            fields["h"].args,
        )

    def test_argument_item_non_null_kept(self) -> None:
        self.assertNotEqual(
            config_from_sdl("type Query { f(a: [Int!]): Int }"),
            config_from_sdl("type Query { f(a: [Int]): Int }"),
        )

    def test_nested_list_not_supported(self) -> None:
        with self.assertRaises(ConfigStructureError):
            config_from_sdl("type Human { names: [[String]] }")
        with self.assertRaises(ConfigStructureError):
            config_from_sdl("type Human { names: [[String!]!]! }")
        with self.assertRaises(ConfigStructureError):
            config_from_sdl("type Human { name(filter: [[String]]): String }")

    def test_interface_input_and_scalar(self) -> None:
        schema_string = dedent(
            """\
            directive @http(path: String) on FIELD_DEFINITION

            scalar Date

            interface Entity {
              id: ID
            }

            input EntityFilter {
              id: ID
              before: Date
            }

            type Query {
              entities(filter: EntityFilter): [Entity] @http(path: "/entities")
            }
        """
        )
        config = config_from_sdl(schema_string)
        self.assertEqual(["Date", "Entity", "EntityFilter", "Query"], list(config.types))
        self.assertEqual(Type(), config.types["Date"])
        self.assertTrue(config.types["Entity"].interface)
        self.assertFalse(config.types["Entity"].input)
        self.assertTrue(config.types["EntityFilter"].input)
        self.assertEqual(Field(type_of="Date"), config.types["EntityFilter"].fields["before"])

    def test_descriptions(self) -> None:
        schema_string = dedent(
            """\
            "A person."
            type Human {
              "The name of the person."
              name("Whether to include the family name." full: Boolean): String
            }
        """
        )
        human = config_from_sdl(schema_string).types["Human"]
        self.assertEqual("A person.", human.doc)
        self.assertEqual("The name of the person.", human.fields["name"].doc)
        self.assertEqual(
            "Whether to include the family name.", human.fields["name"].args["full"].doc
        )

    def test_config_from_ast(self) -> None:
        schema_string = dedent(
            """\
            type Human {
              name: String
            }
        """
        )
        self.assertEqual(config_from_sdl(schema_string), config_from_ast(parse(schema_string)))

    def test_invalid_syntax(self) -> None:
        with self.assertRaises(ConfigParsingError):
            config_from_sdl("type Human {")

    def test_union_not_supported(self) -> None:
        schema_string = dedent(
            """\
            type Human {
              name: String
            }

            type Dog {
              name: String
            }

            union Animal = Human | Dog
        """
        )
        with self.assertRaises(ConfigStructureError):
            config_from_sdl(schema_string)

    def test_enum_not_supported(self) -> None:
        with self.assertRaises(ConfigStructureError):
            config_from_sdl("enum Color { RED GREEN }")

    def test_type_extension_not_supported(self) -> None:
        schema_string = dedent(
            """\
            type Human {
              name: String
            }

            extend type Human {
              age: Int
            }
        """
        )
        with self.assertRaises(ConfigStructureError):
            config_from_sdl(schema_string)

    def test_executable_definition_not_supported(self) -> None:
        with self.assertRaises(ConfigStructureError):
            config_from_sdl("{ human { name } }")

    def test_duplicate_type(self) -> None:
        schema_string = dedent(
            """\
            type Human {
              name: String
            }

            type Human {
              age: Int
            }
        """
        )
        with self.assertRaises(ConfigStructureError):
            config_from_sdl(schema_string)

    def test_duplicate_field(self) -> None:
        with self.assertRaises(ConfigStructureError):
            config_from_sdl("type Human { name: String name: Int }")

    def test_duplicate_argument(self) -> None:
        with self.assertRaises(ConfigStructureError):
            config_from_sdl("type Query { human(name: Int, name: String): String }")

    def test_duplicate_schema_definition(self) -> None:
        schema_string = dedent(
            """\
            schema {
              query: Query
            }

            schema {
              query: Query
            }

            type Query {
              name: String
            }
        """
        )
        with self.assertRaises(ConfigStructureError):
            config_from_sdl(schema_string)
