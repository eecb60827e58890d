"""Joint feedback: time, positions, velocities and accelerations of a robot group."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from simplemsg.byte_array import INT_SIZE, REAL_SIZE, ByteArray, ByteArrayError, Serializable
from simplemsg.joint_data import JointData
from simplemsg.joint_traj_pt_full import ValidFieldType


def _as_real(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


@dataclass(eq=False)
class JointFeedback(Serializable):
    """Joint state reported by a controller.

    Wire layout, in order: robot_id, valid_fields (ints), time (real),
    positions, velocities, accelerations (JointData).
    Passing values to the constructor sets ``valid_fields`` as given.
    """

    robot_id: int = 0
    valid_fields: int = 0
    time: float = 0.0
    positions: JointData = field(default_factory=JointData)
    velocities: JointData = field(default_factory=JointData)
    accelerations: JointData = field(default_factory=JointData)

    def __post_init__(self) -> None:
        self.valid_fields = int(self.valid_fields)
        self.time = _as_real(self.time)
        self.positions = JointData(self.positions)
        self.velocities = JointData(self.velocities)
        self.accelerations = JointData(self.accelerations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JointFeedback):
            return NotImplemented
        return (
            self.robot_id == other.robot_id
            and self.valid_fields == other.valid_fields
            and (not self.is_valid(ValidFieldType.TIME) or self.time == other.time)
            and (not self.is_valid(ValidFieldType.POSITION)
                 or self.positions == other.positions)
            and (not self.is_valid(ValidFieldType.VELOCITY)
                 or self.velocities == other.velocities)
            and (not self.is_valid(ValidFieldType.ACCELERATION)
                 or self.accelerations == other.accelerations)
        )

    __hash__ = None  # type: ignore[assignment]

    def clear(self) -> None:
        """Reset every field to zero and mark all optional fields invalid."""
        self.robot_id = 0
        self.valid_fields = 0
        self.time = 0.0
        self.positions.clear()
        self.velocities.clear()
        self.accelerations.clear()

    def is_valid(self, field: ValidFieldType) -> bool:
        """True if ``field`` is marked as holding valid data."""
        return bool(self.valid_fields & field)

    def set_time(self, time: float) -> None:
        """Set the timestamp and mark it valid."""
        self.time = _as_real(time)
        self.valid_fields |= ValidFieldType.TIME

    def get_time(self) -> tuple[float, bool]:
        """Return the timestamp and whether it is valid."""
        return self.time, self.is_valid(ValidFieldType.TIME)

    def set_positions(self, positions: JointData) -> None:
        """Copy in position data and mark it valid."""
        self.positions.copy_from(positions)
        self.valid_fields |= ValidFieldType.POSITION

    def get_positions(self) -> tuple[JointData, bool]:
        """Return a copy of the positions and whether they are valid."""
        return JointData(self.positions), self.is_valid(ValidFieldType.POSITION)

    def set_velocities(self, velocities: JointData) -> None:
        """Copy in velocity data and mark it valid."""
        self.velocities.copy_from(velocities)
        self.valid_fields |= ValidFieldType.VELOCITY

    def get_velocities(self) -> tuple[JointData, bool]:
        """Return a copy of the velocities and whether they are valid."""
        return JointData(self.velocities), self.is_valid(ValidFieldType.VELOCITY)

    def set_accelerations(self, accelerations: JointData) -> None:
        """Copy in acceleration data and mark it valid."""
        self.accelerations.copy_from(accelerations)
        self.valid_fields |= ValidFieldType.ACCELERATION

    def get_accelerations(self) -> tuple[JointData, bool]:
        """Return a copy of the accelerations and whether they are valid."""
        return JointData(self.accelerations), self.is_valid(ValidFieldType.ACCELERATION)

    def copy_from(self, src: JointFeedback) -> None:
        """Copy every field, valid or not, from ``src``."""
        self.robot_id = src.robot_id
        self.time = src.time
        self.positions.copy_from(src.positions)
        self.velocities.copy_from(src.velocities)
        self.accelerations.copy_from(src.accelerations)
        self.valid_fields = src.valid_fields

    def load(self, buffer: ByteArray) -> None:
        buffer.load_int(self.robot_id)
        buffer.load_int(self.valid_fields)
        buffer.load_real(self.time)
        self.positions.load(buffer)
        self.velocities.load(buffer)
        self.accelerations.load(buffer)

    def unload(self, buffer: ByteArray) -> None:
        if len(buffer) < self.byte_length():
            raise ByteArrayError(
                f"joint feedback needs {self.byte_length()} bytes, "
                f"buffer holds {len(buffer)}")
        self.accelerations.unload(buffer)
        self.velocities.unload(buffer)
        self.positions.unload(buffer)
        self.time = buffer.unload_real()
        self.valid_fields = buffer.unload_int()
        self.robot_id = buffer.unload_int()

    def byte_length(self) -> int:
        return 2 * INT_SIZE + REAL_SIZE + 3 * self.positions.byte_length()