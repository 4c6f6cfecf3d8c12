"""Shared fixtures for the crdt-values test suite."""

from __future__ import annotations

import pytest

from crdt_values.core.enums import ObjType
from crdt_values.domain.scalar import (
    BooleanScalar,
    BytesScalar,
    CounterScalar,
    F64Scalar,
    IntScalar,
    NullScalar,
    ObjectValue,
    ScalarValue,
    StringScalar,
    TimestampScalar,
    UintScalar,
    UnknownScalar,
)


# ---------------------------------------------------------------------------
# Scalar samples
# ---------------------------------------------------------------------------

SAMPLE_SCALARS: dict[type[ScalarValue], ScalarValue] = {
    BytesScalar: BytesScalar(b"\x01\x02"),
    StringScalar: StringScalar("hello"),
    UintScalar: UintScalar(7),
    IntScalar: IntScalar(-7),
    F64Scalar: F64Scalar(1.5),
    CounterScalar: CounterScalar(42),
    TimestampScalar: TimestampScalar(1_700_000_000_000),
    BooleanScalar: BooleanScalar(True),
    UnknownScalar: UnknownScalar(type_code=42, data=b"\xff"),
    NullScalar: NullScalar(),
}


def samples_except(*excluded: type[ScalarValue]) -> list[ScalarValue]:
    """Every sample scalar whose variant is not in *excluded*."""
    return [v for k, v in SAMPLE_SCALARS.items() if k not in excluded]


@pytest.fixture
def map_object() -> ObjectValue:
    """Return a reference to a nested map object."""
    return ObjectValue(obj_id="1@aabbcc", obj_type=ObjType.MAP)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Strip CRDT_VALUES_* variables so settings start from defaults."""
    import os

    for key in list(os.environ):
        if key.startswith("CRDT_VALUES_"):
            monkeypatch.delenv(key)
    return monkeypatch
