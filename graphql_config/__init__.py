# Copyright 2017-present Kensho Technologies, LLC.
"""Commonly-used functions and data types from this package."""
from .config import Arg, Config, Field, RootSchema, Type  # noqa
from .config_builder import config_from_ast, config_from_sdl  # noqa
from .config_transformation import RenameTypes, Transform, rename_types  # noqa
from .exceptions import (  # noqa
    ConfigParsingError,
    ConfigStructureError,
    ConfigValidationError,
    GraphQLConfigError,
)
from .valid import Valid  # noqa


__package_name__ = "graphql-config"
__version__ = "1.0.0"
