# Copyright 2017-present Kensho Technologies, LLC.
from typing import Any, Sequence, Tuple


class GraphQLConfigError(Exception):
    """Generic error when processing a GraphQL configuration."""


class ConfigParsingError(GraphQLConfigError):
    """Exception raised when the provided schema text could not be parsed."""


class ConfigStructureError(GraphQLConfigError):
    """Exception raised when a schema document cannot be represented as a configuration.

    This could be due to many reasons, such as:
    - the document contains unions, enums or type extensions;
    - the document defines the same type, or the schema definition, more than once;
    - the document contains executable definitions (queries, fragments).
    """


class ConfigValidationError(GraphQLConfigError):
    """Raised when a validation result holding one or more errors is unwrapped."""

    errors: Tuple[Any, ...]

    def __init__(self, errors: Sequence[Any]) -> None:
        """Record every error of the failed validation."""
        if not errors:
            raise ValueError(
                "Cannot raise ConfigValidationError without at least one error, but the "
                "provided error sequence was empty."
            )
        super().__init__()
        self.errors = tuple(errors)

    def __str__(self) -> str:
        """Render one error per line."""
        return "\n".join(str(error) for error in self.errors)
