"""SLIP-framed RFID tag reader."""

import logging
import struct
import threading
from typing import List, NamedTuple, Optional, Protocol

logger = logging.getLogger(__name__)

SLIP_END = 0xC0
SLIP_ESC = 0xDB
SLIP_ESC_END = 0xDC
SLIP_ESC_ESC = 0xDD

TAG_LENGTH = 12
_READ_CHUNK = 4096
_POLL_INTERVAL = 0.001


class TagId(NamedTuple):
    """A 12-byte tag identifier split into its 64-bit and 32-bit parts."""

    high: int
    low: int

    def __str__(self) -> str:
        return f"{self.high:016x}{self.low:08x}"


class _Port(Protocol):
    def read(self, size: int) -> bytes: ...


def _parse_tag(frame: bytes) -> TagId:
    low, high = struct.unpack("<IQ", frame)
    return TagId(high, low)


class TagReader:
    """Collects tag identifiers from a byte stream; each SLIP END publishes a scan."""

    def __init__(self, port: Optional[_Port] = None):
        self._port = port
        self._buffer = bytearray()
        self._pending: List[TagId] = []
        self._tag_ids: List[TagId] = []
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def read(self) -> List[TagId]:
        """Tags seen in the most recently completed scan."""
        with self._lock:
            return list(self._tag_ids)

    def feed(self, data: bytes) -> None:
        """Process raw bytes received from the reader."""
        escaped = False
        for byte in data:
            if byte == SLIP_ESC:
                escaped = True
                continue
            if escaped:
                escaped = False
                if byte == SLIP_ESC_END:
                    byte = SLIP_END
                elif byte == SLIP_ESC_ESC:
                    byte = SLIP_ESC
            if byte == SLIP_END:
                self._buffer.clear()
                self._publish()
                continue
            if len(self._buffer) >= TAG_LENGTH:
                logger.warning("Buffer overflow, resetting buffer")
                self._buffer.clear()
            self._buffer.append(byte)
            if len(self._buffer) >= TAG_LENGTH:
                tag = _parse_tag(bytes(self._buffer))
                logger.debug("Tag frame %s", tag)
                if tag not in self._pending:
                    self._pending.append(tag)
                self._buffer.clear()

    def _publish(self) -> None:
        with self._lock:
            self._tag_ids = self._pending
        self._pending = []

    def update(self) -> None:
        """Read whatever the port has available and process it."""
        if self._port is None:
            return
        chunk = self._port.read(_READ_CHUNK)
        if chunk:
            self.feed(chunk)

    def start(self) -> None:
        """Poll the port on a background thread."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="TagReader", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the background polling thread."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        while not self._stop.is_set():
            self.update()
            self._stop.wait(_POLL_INTERVAL)