"""Enumerations used across the value-conversion layer."""

from enum import Enum


class ScalarKind(str, Enum):
    """Tag of a ``ScalarValue`` variant."""

    BYTES = "bytes"
    STRING = "string"
    UINT = "uint"
    INT = "int"
    F64 = "f64"
    COUNTER = "counter"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"
    NULL = "null"


class ObjType(str, Enum):
    """Kind of a nested document object."""

    MAP = "map"
    LIST = "list"
    TEXT = "text"


class CounterConversionCase(str, Enum):
    NOT_COUNTER = "not_counter"


class BooleanConversionCase(str, Enum):
    NOT_BOOL = "not_bool"


class StringConversionCase(str, Enum):
    NOT_STRING = "not_string"


class IntConversionCase(str, Enum):
    NOT_INT = "not_int"


class UIntConversionCase(str, Enum):
    NOT_UINT = "not_uint"


class DoubleConversionCase(str, Enum):
    NOT_DOUBLE = "not_double"


class BytesConversionCase(str, Enum):
    NOT_DATA = "not_data"


class TimestampConversionCase(str, Enum):
    NOT_TIMESTAMP = "not_timestamp"
