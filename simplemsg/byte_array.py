"""Byte buffer used to serialize simple message payloads.

Values are appended to the end of the buffer by the ``load_*`` methods and
taken back from the end by the ``unload_*`` methods, so a structure is
serialized field by field and deserialized in the reverse field order.
The ``unload_front_*`` methods read from the start of the buffer instead.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod

INT_SIZE = 4
REAL_SIZE = 4
BOOL_SIZE = 1


class ByteArrayError(ValueError):
    """Raised when data cannot be loaded into or unloaded from a buffer."""


class Serializable(ABC):
    """An object that can write itself to and read itself from a ByteArray."""

    @abstractmethod
    def load(self, buffer: ByteArray) -> None:
        """Append this object's bytes to ``buffer``."""

    @abstractmethod
    def unload(self, buffer: ByteArray) -> None:
        """Take this object's bytes from the end of ``buffer``."""

    @abstractmethod
    def byte_length(self) -> int:
        """Number of bytes this object occupies when serialized."""


class ByteArray:
    """Growable byte buffer with typed load and unload operations.

    ``byte_swapping`` selects big-endian numbers on the wire; otherwise
    numbers are little-endian. ``max_size`` bounds the buffer length
    (``None`` for no bound).
    """

    def __init__(self, data: bytes = b"", byte_swapping: bool = False,
                 max_size: int | None = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        self.byte_swapping = byte_swapping
        self.max_size = max_size
        self._buffer = bytearray()
        self.load_bytes(data)

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __repr__(self) -> str:
        return (f"ByteArray({bytes(self._buffer)!r}, "
                f"byte_swapping={self.byte_swapping}, max_size={self.max_size})")

    @property
    def _order(self) -> str:
        return ">" if self.byte_swapping else "<"

    def _check_room(self, extra: int) -> None:
        if self.max_size is not None and len(self._buffer) + extra > self.max_size:
            raise ByteArrayError(
                f"adding {extra} bytes would exceed maximum size {self.max_size}")

    def _check_available(self, size: int) -> None:
        if size < 0:
            raise ByteArrayError("size must not be negative")
        if size > len(self._buffer):
            raise ByteArrayError(
                f"buffer holds {len(self._buffer)} bytes, {size} requested")

    def _pack(self, fmt: str, value) -> bytes:
        try:
            return struct.pack(self._order + fmt, value)
        except (struct.error, OverflowError) as exc:
            raise ByteArrayError(f"cannot pack {value!r}: {exc}") from exc

    def clear(self) -> None:
        """Remove all data."""
        self._buffer.clear()

    def copy_from(self, other: ByteArray) -> None:
        """Replace the contents with a copy of ``other``; an empty source is ignored."""
        if len(other):
            self._buffer = bytearray(other._buffer)

    def to_bytes(self) -> bytes:
        """Return a copy of the buffer contents."""
        return bytes(self._buffer)

    # Loading

    def load(self, value) -> None:
        """Append a value, dispatching on its type."""
        if isinstance(value, Serializable):
            value.load(self)
        elif isinstance(value, ByteArray):
            self.load_bytes(value._buffer)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self.load_bytes(value)
        elif isinstance(value, bool):
            self.load_bool(value)
        elif isinstance(value, int):
            self.load_int(value)
        elif isinstance(value, float):
            self.load_real(value)
        else:
            raise TypeError(f"cannot load value of type {type(value).__name__}")

    def load_bytes(self, data) -> None:
        """Append raw bytes."""
        data = bytes(data)
        self._check_room(len(data))
        self._buffer.extend(data)

    def load_int(self, value: int) -> None:
        """Append a 32-bit signed integer."""
        self.load_bytes(self._pack("i", value))

    def load_real(self, value: float) -> None:
        """Append a 32-bit float."""
        self.load_bytes(self._pack("f", float(value)))

    def load_bool(self, value: bool) -> None:
        """Append a one-byte boolean."""
        self.load_bytes(self._pack("?", bool(value)))

    # Unloading from the end

    def unload(self, value: Serializable) -> Serializable:
        """Fill ``value`` from the end of the buffer and return it."""
        if not isinstance(value, Serializable):
            raise TypeError(f"cannot unload into {type(value).__name__}")
        value.unload(self)
        return value

    def unload_bytes(self, size: int) -> bytes:
        """Remove and return the last ``size`` bytes."""
        self._check_available(size)
        if size == 0:
            return b""
        data = bytes(self._buffer[-size:])
        del self._buffer[-size:]
        return data

    def unload_into(self, other: ByteArray, size: int) -> None:
        """Move the last ``size`` bytes onto the end of ``other``, keeping their order."""
        other._buffer.extend(self.unload_bytes(size))

    def unload_int(self) -> int:
        """Remove and return a 32-bit signed integer from the end."""
        return struct.unpack(self._order + "i", self.unload_bytes(INT_SIZE))[0]

    def unload_real(self) -> float:
        """Remove and return a 32-bit float from the end."""
        return struct.unpack(self._order + "f", self.unload_bytes(REAL_SIZE))[0]

    def unload_bool(self) -> bool:
        """Remove and return a one-byte boolean from the end."""
        return struct.unpack(self._order + "?", self.unload_bytes(BOOL_SIZE))[0]

    # Unloading from the front

    def unload_front_bytes(self, size: int) -> bytes:
        """Remove and return the first ``size`` bytes."""
        self._check_available(size)
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        return data

    def unload_front_int(self) -> int:
        """Remove and return a 32-bit signed integer from the front."""
        return struct.unpack(self._order + "i", self.unload_front_bytes(INT_SIZE))[0]

    def unload_front_real(self) -> float:
        """Remove and return a 32-bit float from the front."""
        return struct.unpack(self._order + "f", self.unload_front_bytes(REAL_SIZE))[0]