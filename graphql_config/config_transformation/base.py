# Copyright 2020-present Kensho Technologies, LLC.
from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

from ..valid import Valid


ValueT = TypeVar("ValueT")
ErrorT = TypeVar("ErrorT")


class Transform(Generic[ValueT, ErrorT], metaclass=ABCMeta):
    """Base class for a single rewrite of a value, reporting errors as data.

    A transform never raises for invalid input: it returns a failed Valid holding every problem
    it found, and leaves the decision to abort, log or prompt for a fix to the caller.
    """

    @abstractmethod
    def transform(self, value: ValueT) -> Valid[ValueT, ErrorT]:
        """Return the rewritten value, or every error that prevented the rewrite."""
        raise NotImplementedError()
