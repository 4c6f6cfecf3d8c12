"""Typed outcome of a scalar conversion.

A conversion never raises on a tag mismatch; it returns ``Failure``
carrying the typed error. Callers either pattern-match::

    match Counter.from_value(value):
        case Success(value=counter):
            ...
        case Failure(error=err):
            ...

or call ``unwrap()`` to turn a failure into a raised exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)
D = TypeVar("D")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: D) -> T | D:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    def unwrap(self) -> None:
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default: D) -> D:
        return default


ConversionResult = Union[Success[T], Failure[E]]
