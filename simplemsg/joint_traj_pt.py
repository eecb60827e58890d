"""Joint trajectory point: sequence, joint positions, velocity and duration."""

from __future__ import annotations

from dataclasses import dataclass, field

from simplemsg.byte_array import INT_SIZE, REAL_SIZE, ByteArray, ByteArrayError, Serializable
from simplemsg.joint_data import JointData


@dataclass
class JointTrajPt(Serializable):
    """A waypoint along a joint trajectory.

    Wire layout, in order: sequence (int), position (JointData),
    velocity (real), duration (real).
    """

    sequence: int = 0
    position: JointData = field(default_factory=JointData)
    velocity: float = 0.0
    duration: float = 0.0

    def __post_init__(self) -> None:
        self.position = JointData(self.position)

    def clear(self) -> None:
        """Reset every field to zero."""
        self.sequence = 0
        self.position.clear()
        self.velocity = 0.0
        self.duration = 0.0

    def copy_from(self, src: JointTrajPt) -> None:
        """Copy all fields from ``src``."""
        self.sequence = src.sequence
        self.position.copy_from(src.position)
        self.velocity = src.velocity
        self.duration = src.duration

    def load(self, buffer: ByteArray) -> None:
        buffer.load_int(self.sequence)
        self.position.load(buffer)
        buffer.load_real(self.velocity)
        buffer.load_real(self.duration)

    def unload(self, buffer: ByteArray) -> None:
        if len(buffer) < self.byte_length():
            raise ByteArrayError(
                f"trajectory point needs {self.byte_length()} bytes, "
                f"buffer holds {len(buffer)}")
        self.duration = buffer.unload_real()
        self.velocity = buffer.unload_real()
        self.position.unload(buffer)
        self.sequence = buffer.unload_int()

    def byte_length(self) -> int:
        return INT_SIZE + self.position.byte_length() + 2 * REAL_SIZE