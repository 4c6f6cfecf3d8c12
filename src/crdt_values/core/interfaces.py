"""Protocol interfaces for the value-conversion layer.

Every domain scalar type implements ``ScalarValueRepresentable``; the
registry in ``domain.conversions`` dispatches through the same shape for
builtin Python types that cannot carry the methods themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from crdt_values.core.errors import ScalarConversionError
    from crdt_values.core.result import ConversionResult
    from crdt_values.domain.scalar import ScalarValue, Value

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Domain types
# ---------------------------------------------------------------------------

@runtime_checkable
class ScalarValueRepresentable(Protocol):
    """A domain type that converts to and from a tagged scalar value.

    ``from_value`` is total: it returns ``Failure`` for every value that
    does not carry the expected variant and never raises.
    """

    @classmethod
    def from_value(cls, value: Value) -> ConversionResult[Any, ScalarConversionError]: ...

    def to_scalar_value(self) -> ScalarValue: ...


# ---------------------------------------------------------------------------
# Converters for foreign types
# ---------------------------------------------------------------------------

@runtime_checkable
class IScalarConverter(Protocol[T]):
    """Conversion pair for a Python type that is not a domain type."""

    def from_value(self, value: Value) -> ConversionResult[T, ScalarConversionError]: ...

    def to_scalar_value(self, obj: T) -> ScalarValue: ...
