"""Robot status: drive, e-stop, error, motion and mode states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from simplemsg.byte_array import INT_SIZE, ByteArray, ByteArrayError, Serializable


class RobotMode(IntEnum):
    """Controller operating mode."""

    UNKNOWN = -1
    MANUAL = 1
    AUTO = 2


class TriState(IntEnum):
    """A true/false state that may also be unknown."""

    TS_UNKNOWN = -1
    TS_TRUE = 1
    TS_ON = 1
    TS_ENABLED = 1
    TS_HIGH = 1
    TS_FALSE = 0
    TS_OFF = 0
    TS_DISABLED = 0
    TS_LOW = 0


def _coerce(enum_cls, value):
    """Return ``value`` as a member of ``enum_cls``, or as a plain int if it is none."""
    try:
        return enum_cls(value)
    except ValueError:
        return int(value)


_FIELDS = ("drives_powered", "e_stopped", "error_code", "in_error",
           "in_motion", "mode", "motion_possible")


@dataclass
class RobotStatus(Serializable):
    """Robot status as reported by a controller.

    Wire layout, in order, all ints: drives_powered, e_stopped, error_code,
    in_error, in_motion, mode, motion_possible. Values outside the enums
    are kept as plain ints.
    """

    drives_powered: TriState = TriState.TS_UNKNOWN
    e_stopped: TriState = TriState.TS_UNKNOWN
    error_code: int = 0
    in_error: TriState = TriState.TS_UNKNOWN
    in_motion: TriState = TriState.TS_UNKNOWN
    mode: RobotMode = RobotMode.UNKNOWN
    motion_possible: TriState = TriState.TS_UNKNOWN

    def __post_init__(self) -> None:
        self._normalize()

    def _normalize(self) -> None:
        self.drives_powered = _coerce(TriState, self.drives_powered)
        self.e_stopped = _coerce(TriState, self.e_stopped)
        self.error_code = int(self.error_code)
        self.in_error = _coerce(TriState, self.in_error)
        self.in_motion = _coerce(TriState, self.in_motion)
        self.mode = _coerce(RobotMode, self.mode)
        self.motion_possible = _coerce(TriState, self.motion_possible)

    def clear(self) -> None:
        """Set every state to unknown and the error code to zero."""
        self.drives_powered = TriState.TS_UNKNOWN
        self.e_stopped = TriState.TS_UNKNOWN
        self.error_code = 0
        self.in_error = TriState.TS_UNKNOWN
        self.in_motion = TriState.TS_UNKNOWN
        self.mode = RobotMode.UNKNOWN
        self.motion_possible = TriState.TS_UNKNOWN

    def copy_from(self, src: RobotStatus) -> None:
        """Copy every field from ``src``."""
        for name in _FIELDS:
            setattr(self, name, getattr(src, name))
        self._normalize()

    def load(self, buffer: ByteArray) -> None:
        for name in _FIELDS:
            buffer.load_int(int(getattr(self, name)))

    def unload(self, buffer: ByteArray) -> None:
        if len(buffer) < self.byte_length():
            raise ByteArrayError(
                f"robot status needs {self.byte_length()} bytes, "
                f"buffer holds {len(buffer)}")
        for name in reversed(_FIELDS):
            setattr(self, name, buffer.unload_int())
        self._normalize()

    def byte_length(self) -> int:
        return len(_FIELDS) * INT_SIZE