# Copyright 2020-present Kensho Technologies, LLC.
"""Validation results that accumulate every error instead of stopping at the first one.

A Valid is either a success holding a value, or a failure holding one or more errors. Unlike
exceptions, failures can be combined: running a check over a whole batch of inputs with
Valid.from_iter() reports every failing input at once, e.g. every misspelled type name in a
renaming, rather than forcing a fix-one-rerun loop.
"""
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from funcy import lcat

from .exceptions import ConfigValidationError


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
InputT = TypeVar("InputT")


@dataclass(frozen=True)
class Valid(Generic[T, E]):
    """The outcome of a validation step: a success value, or a non-empty tuple of errors.

    Use the succeed(), fail() and fail_with() constructors rather than instantiating directly.
    """

    value: Optional[T]
    errors: Tuple[E, ...] = ()

    @classmethod
    def succeed(cls, value: T) -> "Valid[T, E]":
        """Return a success holding the given value."""
        return cls(value, ())

    @classmethod
    def fail(cls, error: E) -> "Valid[T, E]":
        """Return a failure holding exactly the given error."""
        return cls(None, (error,))

    @classmethod
    def fail_with(cls, errors: Iterable[E]) -> "Valid[T, E]":
        """Return a failure holding all the given errors, in order."""
        error_tuple = tuple(errors)
        if not error_tuple:
            raise ValueError(
                "A failed validation must hold at least one error, but the provided errors "
                "were empty."
            )
        return cls(None, error_tuple)

    @classmethod
    def from_iter(
        cls, inputs: Iterable[InputT], func: Callable[[InputT], "Valid[U, E]"]
    ) -> "Valid[List[U], E]":
        """Apply func to every input, collecting all results or all errors.

        Every input is visited even after a failure has been seen. If all calls succeed, the
        result holds the list of their values in input order. Otherwise, it holds the errors of
        every failed call, concatenated in input order; successes contribute nothing.
        """
        results = [func(item) for item in inputs]
        errors = lcat(result.errors for result in results)
        if errors:
            return cls.fail_with(errors)
        return cls.succeed([result.value for result in results])

    @property
    def is_succeed(self) -> bool:
        """Return True if this is a success."""
        return not self.errors

    @property
    def is_fail(self) -> bool:
        """Return True if this is a failure."""
        return bool(self.errors)

    def map(self, func: Callable[[T], U]) -> "Valid[U, E]":
        """Apply func to the success value. Failures are returned with their errors intact."""
        if self.is_fail:
            return Valid(None, self.errors)
        return Valid.succeed(func(self.value))  # type: ignore[arg-type]

    def and_then(self, func: Callable[[T], "Valid[U, E]"]) -> "Valid[U, E]":
        """Chain a further validation step onto a success. Failures skip the step."""
        if self.is_fail:
            return Valid(None, self.errors)
        return func(self.value)  # type: ignore[arg-type]

    def zip(self, other: "Valid[U, E]") -> "Valid[Tuple[T, U], E]":
        """Pair two successes, or fail with this result's errors followed by the other's."""
        if self.is_fail or other.is_fail:
            return Valid.fail_with(self.errors + other.errors)
        return Valid.succeed((self.value, other.value))  # type: ignore[arg-type]

    def to_result(self) -> T:
        """Return the success value, or raise ConfigValidationError with every error."""
        if self.is_fail:
            raise ConfigValidationError(self.errors)
        return self.value  # type: ignore[return-value]
