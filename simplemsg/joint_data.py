"""Fixed-size set of joint values."""

from __future__ import annotations

import struct
from typing import Iterable, Iterator

from simplemsg.byte_array import REAL_SIZE, ByteArray, ByteArrayError, Serializable


def _to_real(value: float) -> float:
    """Round ``value`` to the 32-bit float used on the wire."""
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


class JointData(Serializable):
    """Values for a fixed number of joints, all zero unless given."""

    MAX_NUM_JOINTS = 10

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._joints = [0.0] * self.MAX_NUM_JOINTS
        for index, value in enumerate(values):
            self.set_joint(index, value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._joints)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JointData):
            return NotImplemented
        return self._joints == other._joints

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JointData({self._joints!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.MAX_NUM_JOINTS:
            raise IndexError(
                f"joint index {index} outside 0..{self.MAX_NUM_JOINTS - 1}")

    def clear(self) -> None:
        """Set every joint to zero."""
        self._joints = [0.0] * self.MAX_NUM_JOINTS

    def set_joint(self, index: int, value: float) -> None:
        """Set one joint value."""
        self._check_index(index)
        self._joints[index] = _to_real(value)

    def get_joint(self, index: int) -> float:
        """Return one joint value."""
        self._check_index(index)
        return self._joints[index]

    def copy_from(self, src: JointData) -> None:
        """Copy all joint values from ``src``."""
        self._joints = list(src._joints)

    def load(self, buffer: ByteArray) -> None:
        for value in self._joints:
            buffer.load_real(value)

    def unload(self, buffer: ByteArray) -> None:
        if len(buffer) < self.byte_length():
            raise ByteArrayError(
                f"joint data needs {self.byte_length()} bytes, buffer holds {len(buffer)}")
        values = [buffer.unload_real() for _ in range(self.MAX_NUM_JOINTS)]
        self._joints = values[::-1]

    def byte_length(self) -> int:
        return self.MAX_NUM_JOINTS * REAL_SIZE