"""Rotary encoder that reports movement in whole detents."""

from typing import Callable

_COUNTS_PER_DETENT = 4


def _to_detents(raw: int) -> int:
    """Convert raw counts to detents, truncating toward zero."""
    detents = abs(raw) // _COUNTS_PER_DETENT
    return detents if raw >= 0 else -detents


class Encoder:
    """Tracks a raw encoder count and exposes the change since the last update."""

    def __init__(self, source: Callable[[], int]):
        self._source = source
        self._last = 0
        self._value = 0

    def difference(self) -> int:
        """Detents moved between the previous and the current value."""
        return self._value - self._last

    def update(self) -> None:
        """Sample the raw count and refresh the current value."""
        raw = self._source()
        if abs(self._last * _COUNTS_PER_DETENT - raw) < _COUNTS_PER_DETENT and self._value == self._last:
            return
        self._last = self._value
        self._value = _to_detents(raw)