"""Joint trajectory: an ordered, bounded list of trajectory points."""

from __future__ import annotations

from typing import Iterator

from simplemsg.byte_array import INT_SIZE, ByteArray, ByteArrayError, Serializable
from simplemsg.joint_traj_pt import JointTrajPt


def _copy_point(point: JointTrajPt) -> JointTrajPt:
    copy = JointTrajPt()
    copy.copy_from(point)
    return copy


class JointTraj(Serializable):
    """A sequence of joint trajectory points holding at most ``max_points``.

    Wire layout: every point in order, followed by the point count (int).
    """

    DEFAULT_MAX_POINTS = 200

    def __init__(self, max_points: int = DEFAULT_MAX_POINTS) -> None:
        if max_points < 0:
            raise ValueError("max_points must not be negative")
        self.max_points = max_points
        self._points: list[JointTrajPt] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[JointTrajPt]:
        return (_copy_point(point) for point in self._points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JointTraj):
            return NotImplemented
        return self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JointTraj(max_points={self.max_points}, points={self._points!r})"

    def clear(self) -> None:
        """Remove every point."""
        self._points.clear()

    def is_full(self) -> bool:
        """True when no more points can be added."""
        return len(self._points) >= self.max_points

    def add_point(self, point: JointTrajPt) -> None:
        """Append a copy of ``point``; raises ValueError when full."""
        if self.is_full():
            raise ValueError(f"trajectory is full ({self.max_points} points)")
        self._points.append(_copy_point(point))

    def get_point(self, index: int) -> JointTrajPt:
        """Return a copy of the point at ``index``."""
        if not 0 <= index < len(self._points):
            raise IndexError(
                f"point index {index} outside trajectory of size {len(self._points)}")
        return _copy_point(self._points[index])

    def copy_from(self, src: JointTraj) -> None:
        """Replace the points with copies of those in ``src``."""
        if len(src) > self.max_points:
            raise ValueError(
                f"source holds {len(src)} points, maximum is {self.max_points}")
        self._points = [_copy_point(point) for point in src._points]

    def load(self, buffer: ByteArray) -> None:
        for point in self._points:
            point.load(buffer)
        buffer.load_int(len(self._points))

    def unload(self, buffer: ByteArray) -> None:
        size = buffer.unload_int()
        if not 0 <= size <= self.max_points:
            raise ByteArrayError(
                f"trajectory size {size} outside 0..{self.max_points}")
        needed = size * JointTrajPt().byte_length()
        if len(buffer) < needed:
            raise ByteArrayError(
                f"trajectory of {size} points needs {needed} bytes, "
                f"buffer holds {len(buffer)}")
        points = []
        for _ in range(size):
            point = JointTrajPt()
            point.unload(buffer)
            points.append(point)
        self._points = points[::-1]

    def byte_length(self) -> int:
        return INT_SIZE + sum(point.byte_length() for point in self._points)