"""Counter register value.

The logical value of a counter changes only through increments applied by
the document engine; this type is the read/write snapshot of that value as
application code sees it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from crdt_values.core.errors import CounterScalarConversionError
from crdt_values.core.result import ConversionResult, Failure, Success
from crdt_values.domain.scalar import CounterScalar, Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Counter:
    """The value of a CRDT counter."""

    value: int

    @classmethod
    def from_int64(cls, value: int) -> Counter:
        """Build from a 64-bit wire integer.

        Python ints are unbounded, so narrowing to the platform width never
        changes the number.
        """
        return cls(int(value))

    # Conversion -----------------------------------------------------------
    @classmethod
    def from_value(
        cls, value: Value
    ) -> ConversionResult[Counter, CounterScalarConversionError]:
        """Narrow a ``Counter`` variant; anything else fails with ``NOT_COUNTER``."""
        match value:
            case CounterScalar(value=d):
                return Success(cls.from_int64(d))
            case _:
                logger.debug("Value %s is not a counter", value)
                return Failure(CounterScalarConversionError.not_counter(value))

    def to_scalar_value(self) -> CounterScalar:
        """Wrap as the ``Counter`` variant.

        Raises ``ScalarRangeError`` when the value does not fit in int64.
        """
        return CounterScalar(self.value)
