"""Snowflake-style string IDs for listings.

Monotonically increasing within one process, sortable by creation time.
Single-process generator; run one machine_id per worker if scaled out.
"""

import threading
import time


class SnowflakeIdGenerator:
    """Layout (63 bits used):
      - 41 bits: millisecond timestamp since _EPOCH_MS
      - 10 bits: machine_id (0-1023)
      - 12 bits: per-millisecond sequence (0-4095)
    """

    _EPOCH_MS = 1_767_225_600_000  # 2026-01-01T00:00:00Z
    _MACHINE_BITS = 10
    _SEQUENCE_BITS = 12
    _MAX_SEQUENCE = (1 << _SEQUENCE_BITS) - 1

    def __init__(self, machine_id: int = 0) -> None:
        if not (0 <= machine_id < (1 << self._MACHINE_BITS)):
            raise ValueError(f"machine_id must be 0-{(1 << self._MACHINE_BITS) - 1}")
        self._machine_id = machine_id
        self._sequence = 0
        self._last_ms = -1
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            now_ms = self._now_ms()
            if now_ms == self._last_ms:
                self._sequence = (self._sequence + 1) & self._MAX_SEQUENCE
                if self._sequence == 0:
                    # sequence exhausted for this millisecond
                    while now_ms <= self._last_ms:
                        now_ms = self._now_ms()
            else:
                self._sequence = 0

            self._last_ms = now_ms
            value = (
                ((now_ms - self._EPOCH_MS) << (self._MACHINE_BITS + self._SEQUENCE_BITS))
                | (self._machine_id << self._SEQUENCE_BITS)
                | self._sequence
            )
            return str(value)

    @staticmethod
    def _now_ms() -> int:
        return int(time.time() * 1000)


_listing_ids = SnowflakeIdGenerator()


def generate_id() -> str:
    """Next listing id from the module-level generator."""
    return _listing_ids.next_id()
