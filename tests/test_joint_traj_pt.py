import pytest

from simplemsg.byte_array import ByteArray, ByteArrayError
from simplemsg.joint_data import JointData
from simplemsg.joint_traj_pt import JointTrajPt


def _sample():
    return JointTrajPt(sequence=4, position=JointData([1.0, -2.0, 0.5]),
                       velocity=0.75, duration=2.5)


def test_default_is_empty():
    pt = JointTrajPt()
    assert (pt.sequence, pt.velocity, pt.duration) == (0, 0.0, 0.0)
    assert pt.position == JointData()


def test_round_trip():
    original = _sample()
    buf = ByteArray()
    buf.load(original)
    assert len(buf) == original.byte_length()
    restored = buf.unload(JointTrajPt())
    assert restored == original
    assert len(buf) == 0


def test_round_trip_with_byte_swapping():
    original = _sample()
    buf = ByteArray(byte_swapping=True)
    original.load(buf)
    restored = JointTrajPt()
    restored.unload(buf)
    assert restored == original


def test_wire_order_starts_with_sequence_and_ends_with_duration():
    pt = _sample()
    buf = ByteArray()
    pt.load(buf)
    assert buf.unload_front_int() == pt.sequence
    assert buf.unload_real() == pt.duration
    assert buf.unload_real() == pt.velocity


def test_unload_short_buffer_raises():
    buf = ByteArray(b"\x00" * 12)
    pt = _sample()
    with pytest.raises(ByteArrayError):
        pt.unload(buf)
    assert len(buf) == 12
    assert pt == _sample()


def test_position_is_copied_on_construction():
    joints = JointData([1.0])
    pt = JointTrajPt(position=joints)
    joints.set_joint(0, 3.0)
    assert pt.position.get_joint(0) == 1.0


def test_copy_from():
    src = _sample()
    dest = JointTrajPt()
    dest.copy_from(src)
    assert dest == src
    src.position.set_joint(0, 8.0)
    assert dest.position.get_joint(0) == 1.0


def test_clear():
    pt = _sample()
    pt.clear()
    assert pt == JointTrajPt()


@pytest.mark.parametrize("change", [
    {"sequence": 5},
    {"velocity": 0.5},
    {"duration": 1.0},
    {"position": JointData([1.0, -2.0, 0.25])},
])
def test_equality_checks_every_field(change):
    base = {"sequence": 4, "position": JointData([1.0, -2.0, 0.5]),
            "velocity": 0.75, "duration": 2.5}
    base.update(change)
    assert (JointTrajPt(**base) == _sample()) is False