"""Custom exception hierarchy for the value-conversion layer."""

from __future__ import annotations

from typing import Any

from .enums import (
    BooleanConversionCase,
    BytesConversionCase,
    CounterConversionCase,
    DoubleConversionCase,
    IntConversionCase,
    StringConversionCase,
    TimestampConversionCase,
    UIntConversionCase,
)


class CrdtValueError(Exception):
    """Base exception for all crdt_values errors."""


# --- Configuration ---
class ConfigError(CrdtValueError):
    """Invalid or unreadable configuration."""


# --- Scalar construction ---
class ScalarRangeError(CrdtValueError, ValueError):
    """Integer does not fit the fixed width of a scalar variant."""

    def __init__(self, kind: str, value: int, low: int, high: int):
        self.kind = kind
        self.value = value
        self.low = low
        self.high = high
        super().__init__(kind, value, low, high)

    def __str__(self) -> str:
        return f"{self.kind} value {self.value} is outside the range [{self.low}, {self.high}]"


class UnsupportedTypeError(CrdtValueError, TypeError):
    """No scalar converter is registered for a Python type."""

    def __init__(self, py_type: type):
        self.py_type = py_type
        super().__init__(py_type)

    def __str__(self) -> str:
        return f"No scalar converter registered for type {self.py_type.__qualname__}"


# --- Conversion ---
class ScalarConversionError(CrdtValueError):
    """A document value could not be read as the requested scalar type.

    Every concrete subclass has exactly one ``case``, named for the variant
    it expected, and carries the offending value for diagnostics.
    """

    expected: str = "a scalar value"

    def __init__(self, case: Any, value: Any):
        self.case = case
        self.value = value
        # args must rebuild the error, or unpickling fails
        super().__init__(case, value)

    def __str__(self) -> str:
        return self.error_description

    @property
    def error_description(self) -> str:
        """Human-readable message naming the unexpected value."""
        return f"Failed to read the scalar value {self.value} as {self.expected}."

    @property
    def failure_reason(self) -> str | None:
        return None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.case == other.case and self.value == other.value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        try:
            return hash((type(self), self.case, self.value))
        except TypeError:
            # foreign inputs to from_value may be unhashable
            return hash((type(self), self.case, repr(self.value)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.case.value}, {self.value!r})"


class CounterScalarConversionError(ScalarConversionError):
    """Failed to read a value as a signed integer counter."""

    expected = "a signed integer counter"

    def __init__(self, case: CounterConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_counter(cls, value: Any) -> CounterScalarConversionError:
        return cls(CounterConversionCase.NOT_COUNTER, value)


class BooleanScalarConversionError(ScalarConversionError):
    expected = "a boolean"

    def __init__(self, case: BooleanConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_bool(cls, value: Any) -> BooleanScalarConversionError:
        return cls(BooleanConversionCase.NOT_BOOL, value)


class StringScalarConversionError(ScalarConversionError):
    expected = "a string"

    def __init__(self, case: StringConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_string(cls, value: Any) -> StringScalarConversionError:
        return cls(StringConversionCase.NOT_STRING, value)


class IntScalarConversionError(ScalarConversionError):
    expected = "a signed integer"

    def __init__(self, case: IntConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_int(cls, value: Any) -> IntScalarConversionError:
        return cls(IntConversionCase.NOT_INT, value)


class UIntScalarConversionError(ScalarConversionError):
    expected = "an unsigned integer"

    def __init__(self, case: UIntConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_uint(cls, value: Any) -> UIntScalarConversionError:
        return cls(UIntConversionCase.NOT_UINT, value)


class DoubleScalarConversionError(ScalarConversionError):
    expected = "a double-precision float"

    def __init__(self, case: DoubleConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_double(cls, value: Any) -> DoubleScalarConversionError:
        return cls(DoubleConversionCase.NOT_DOUBLE, value)


class BytesScalarConversionError(ScalarConversionError):
    expected = "a byte sequence"

    def __init__(self, case: BytesConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_data(cls, value: Any) -> BytesScalarConversionError:
        return cls(BytesConversionCase.NOT_DATA, value)


class TimestampScalarConversionError(ScalarConversionError):
    expected = "a timestamp"

    def __init__(self, case: TimestampConversionCase, value: Any):
        super().__init__(case, value)

    @classmethod
    def not_timestamp(cls, value: Any) -> TimestampScalarConversionError:
        return cls(TimestampConversionCase.NOT_TIMESTAMP, value)
