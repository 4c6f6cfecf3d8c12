"""Scalar conversions for builtin Python types and the converter registry.

Builtins cannot carry ``from_value``/``to_scalar_value`` themselves, so each
gets a small converter object registered against its exact type. Domain
types such as ``Counter`` and ``UInt`` implement the protocol directly and
are dispatched without a registry entry.

Every converter follows the same shape: one expected variant, unwrap on
match, and a single-case error carrying the offending value otherwise.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, TypeVar

from crdt_values.core.errors import (
    BooleanScalarConversionError,
    BytesScalarConversionError,
    DoubleScalarConversionError,
    IntScalarConversionError,
    ScalarConversionError,
    StringScalarConversionError,
    TimestampScalarConversionError,
    UIntScalarConversionError,
    UnsupportedTypeError,
)
from crdt_values.core.interfaces import IScalarConverter
from crdt_values.core.result import ConversionResult, Failure, Success
from crdt_values.domain.scalar import (
    BooleanScalar,
    BytesScalar,
    F64Scalar,
    IntScalar,
    ScalarValue,
    StringScalar,
    TimestampScalar,
    UintScalar,
    Value,
)

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Domain wrapper for unsigned integers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UInt:
    """Unsigned 64-bit integer; Python has no distinct unsigned type."""

    value: int

    @classmethod
    def from_value(cls, value: Value) -> ConversionResult[UInt, UIntScalarConversionError]:
        match value:
            case UintScalar(value=d):
                return Success(cls(d))
            case _:
                logger.debug("Value %s is not an unsigned integer", value)
                return Failure(UIntScalarConversionError.not_uint(value))

    def to_scalar_value(self) -> UintScalar:
        return UintScalar(self.value)


# ---------------------------------------------------------------------------
# Builtin converters
# ---------------------------------------------------------------------------

class BoolConverter:
    def from_value(self, value: Value) -> ConversionResult[bool, BooleanScalarConversionError]:
        match value:
            case BooleanScalar(value=b):
                return Success(b)
            case _:
                logger.debug("Value %s is not a boolean", value)
                return Failure(BooleanScalarConversionError.not_bool(value))

    def to_scalar_value(self, obj: bool) -> BooleanScalar:
        return BooleanScalar(obj)


class StrConverter:
    def from_value(self, value: Value) -> ConversionResult[str, StringScalarConversionError]:
        match value:
            case StringScalar(value=s):
                return Success(s)
            case _:
                logger.debug("Value %s is not a string", value)
                return Failure(StringScalarConversionError.not_string(value))

    def to_scalar_value(self, obj: str) -> StringScalar:
        return StringScalar(obj)


class IntConverter:
    def from_value(self, value: Value) -> ConversionResult[int, IntScalarConversionError]:
        match value:
            case IntScalar(value=i):
                return Success(i)
            case _:
                logger.debug("Value %s is not a signed integer", value)
                return Failure(IntScalarConversionError.not_int(value))

    def to_scalar_value(self, obj: int) -> IntScalar:
        return IntScalar(obj)


class FloatConverter:
    def from_value(self, value: Value) -> ConversionResult[float, DoubleScalarConversionError]:
        match value:
            case F64Scalar(value=f):
                return Success(f)
            case _:
                logger.debug("Value %s is not a double", value)
                return Failure(DoubleScalarConversionError.not_double(value))

    def to_scalar_value(self, obj: float) -> F64Scalar:
        return F64Scalar(obj)


class BytesConverter:
    def from_value(self, value: Value) -> ConversionResult[bytes, BytesScalarConversionError]:
        match value:
            case BytesScalar(value=data):
                return Success(data)
            case _:
                logger.debug("Value %s is not a byte sequence", value)
                return Failure(BytesScalarConversionError.not_data(value))

    def to_scalar_value(self, obj: bytes) -> BytesScalar:
        return BytesScalar(obj)


class DatetimeConverter:
    """Timestamps travel as integer milliseconds since the epoch.

    Naive datetimes are taken to be UTC; decoded datetimes are always
    timezone-aware UTC. Sub-millisecond precision is dropped.
    """

    def from_value(
        self, value: Value
    ) -> ConversionResult[datetime, TimestampScalarConversionError]:
        match value:
            case TimestampScalar(value=ms):
                try:
                    return Success(_EPOCH + timedelta(milliseconds=ms))
                except OverflowError:
                    logger.debug("Timestamp %s is outside the datetime range", value)
                    return Failure(TimestampScalarConversionError.not_timestamp(value))
            case _:
                logger.debug("Value %s is not a timestamp", value)
                return Failure(TimestampScalarConversionError.not_timestamp(value))

    def to_scalar_value(self, obj: datetime) -> TimestampScalar:
        if obj.tzinfo is None:
            obj = obj.replace(tzinfo=timezone.utc)
        return TimestampScalar((obj - _EPOCH) // _ONE_MILLISECOND)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_CONVERTERS: dict[type, IScalarConverter[Any]] = {
    bool: BoolConverter(),
    str: StrConverter(),
    int: IntConverter(),
    float: FloatConverter(),
    bytes: BytesConverter(),
    datetime: DatetimeConverter(),
}


def register_converter(py_type: type[T], converter: IScalarConverter[T]) -> None:
    """Register *converter* for values whose exact type is *py_type*.

    Intended to be called at import time; replaces any existing entry.
    """
    _CONVERTERS[py_type] = converter


def converter_for(py_type: type) -> IScalarConverter[Any]:
    """Return the converter registered for *py_type* (exact match)."""
    try:
        return _CONVERTERS[py_type]
    except KeyError:
        raise UnsupportedTypeError(py_type) from None


def _is_representable(cls: type) -> bool:
    # Converter objects share the method names; only domain types expose
    # from_value as a classmethod.
    return isinstance(inspect.getattr_static(cls, "from_value", None), classmethod) and callable(
        getattr(cls, "to_scalar_value", None)
    )


def to_scalar_value(obj: Any) -> ScalarValue:
    """Lift *obj* into a tagged scalar value."""
    py_type = type(obj)
    if py_type not in _CONVERTERS and _is_representable(py_type):
        return obj.to_scalar_value()
    return converter_for(py_type).to_scalar_value(obj)


def from_value(
    target_type: type[T], value: Value
) -> ConversionResult[T, ScalarConversionError]:
    """Narrow *value* to *target_type*."""
    if target_type not in _CONVERTERS and _is_representable(target_type):
        return target_type.from_value(value)  # type: ignore[attr-defined]
    return converter_for(target_type).from_value(value)
