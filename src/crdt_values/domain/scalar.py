"""Tagged scalar values and document values.

``ScalarValue`` is the closed set of primitives a CRDT document can store.
Each variant is an immutable dataclass tagged with a ``ScalarKind``; the
fixed-width integer variants validate their range on construction so that
an out-of-range number can never reach the wire.

``Value`` is what a document read hands back: either a scalar or a
reference to a nested object (map, list or text).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from crdt_values.core.enums import ObjType, ScalarKind
from crdt_values.core.errors import ScalarRangeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


def _check_int(kind: ScalarKind, value: object, low: int, high: int) -> None:
    # bool is an int subclass; True must never pass as Int(1)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{kind.value} expects an int, got {type(value).__name__}"
        )
    if not low <= value <= high:
        raise ScalarRangeError(kind.value, value, low, high)


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScalarValue:
    """Immutable base for every scalar variant."""

    kind: ClassVar[ScalarKind]


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BytesScalar(ScalarValue):
    kind: ClassVar[ScalarKind] = ScalarKind.BYTES

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise TypeError(f"bytes expects bytes, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return f"Bytes(0x{self.value.hex()})"


@dataclass(frozen=True)
class StringScalar(ScalarValue):
    kind: ClassVar[ScalarKind] = ScalarKind.STRING

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"string expects str, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return f"String({self.value!r})"


@dataclass(frozen=True)
class UintScalar(ScalarValue):
    kind: ClassVar[ScalarKind] = ScalarKind.UINT

    value: int

    def __post_init__(self) -> None:
        _check_int(self.kind, self.value, 0, UINT64_MAX)

    def __str__(self) -> str:
        return f"Uint({self.value})"


@dataclass(frozen=True)
class IntScalar(ScalarValue):
    kind: ClassVar[ScalarKind] = ScalarKind.INT

    value: int

    def __post_init__(self) -> None:
        _check_int(self.kind, self.value, INT64_MIN, INT64_MAX)

    def __str__(self) -> str:
        return f"Int({self.value})"


@dataclass(frozen=True)
class F64Scalar(ScalarValue):
    kind: ClassVar[ScalarKind] = ScalarKind.F64

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"f64 expects float, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        return f"F64({self.value!r})"


@dataclass(frozen=True)
class CounterScalar(ScalarValue):
    """Counter register; carries a signed 64-bit integer."""

    kind: ClassVar[ScalarKind] = ScalarKind.COUNTER

    value: int

    def __post_init__(self) -> None:
        _check_int(self.kind, self.value, INT64_MIN, INT64_MAX)

    def __str__(self) -> str:
        return f"Counter({self.value})"


@dataclass(frozen=True)
class TimestampScalar(ScalarValue):
    """Milliseconds since the Unix epoch."""

    kind: ClassVar[ScalarKind] = ScalarKind.TIMESTAMP

    value: int

    def __post_init__(self) -> None:
        _check_int(self.kind, self.value, INT64_MIN, INT64_MAX)

    def __str__(self) -> str:
        return f"Timestamp({self.value})"


@dataclass(frozen=True)
class BooleanScalar(ScalarValue):
    kind: ClassVar[ScalarKind] = ScalarKind.BOOLEAN

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"boolean expects bool, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return f"Boolean({'true' if self.value else 'false'})"


@dataclass(frozen=True)
class UnknownScalar(ScalarValue):
    """A scalar written by a newer engine whose type code is not understood."""

    kind: ClassVar[ScalarKind] = ScalarKind.UNKNOWN

    type_code: int
    data: bytes = b""

    def __str__(self) -> str:
        return f"Unknown(type_code={self.type_code}, 0x{self.data.hex()})"


@dataclass(frozen=True)
class NullScalar(ScalarValue):
    kind: ClassVar[ScalarKind] = ScalarKind.NULL

    def __str__(self) -> str:
        return "Null"


ALL_SCALAR_VARIANTS: tuple[type[ScalarValue], ...] = (
    BytesScalar,
    StringScalar,
    UintScalar,
    IntScalar,
    F64Scalar,
    CounterScalar,
    TimestampScalar,
    BooleanScalar,
    UnknownScalar,
    NullScalar,
)


# ---------------------------------------------------------------------------
# Document values
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ObjectValue:
    """Reference to a nested document object."""

    obj_id: str
    obj_type: ObjType

    def __str__(self) -> str:
        return f"Object({self.obj_type.value}, {self.obj_id})"


Value = Union[ScalarValue, ObjectValue]
