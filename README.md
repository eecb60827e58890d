# simplemsg

Binary payloads for a small message protocol used between motion-planning
software and industrial robot controllers, plus an abstract interface for
the connection that carries them.

## What is in it

- `simplemsg.byte_array` – `ByteArray` is a byte buffer. Values are loaded
  onto its end and unloaded from its end, or from its front. It holds 32-bit
  signed integers (`load_int` / `unload_int`), 32-bit reals (`load_real` /
  `unload_real`), one-byte booleans (`load_bool` / `unload_bool`) and raw
  bytes (`load_bytes` / `unload_bytes`). Numbers are little-endian, or
  big-endian when `byte_swapping=True`. `max_size` puts a limit on the
  buffer's length. `Serializable` is the interface that every payload type
  implements: `load`, `unload` and `byte_length`. Any failure raises
  `ByteArrayError`, for example a buffer that is too short or a value that
  does not fit.
- `simplemsg.joint_data` – `JointData`, which holds ten joint values. Each
  value is stored as a 32-bit real. An index outside the range raises
  `IndexError`.
- `simplemsg.joint_traj_pt` – `JointTrajPt`, a trajectory waypoint with the
  fields `sequence`, `position`, `velocity` and `duration`.
- `simplemsg.joint_traj` – `JointTraj`, a bounded list of waypoints. The
  default limit is 200. `add_point` raises `ValueError` when the list is
  full.
- `simplemsg.joint_traj_pt_full` – `JointTrajPtFull`, a waypoint that carries
  `robot_id`, `sequence`, `time`, `positions`, `velocities` and
  `accelerations`. The optional fields are marked valid or invalid in the
  `valid_fields` bitmask (`ValidFieldType`). `SpecialSeqValue` holds the
  sequence numbers that start, end or stop a trajectory.
- `simplemsg.joint_feedback` – `JointFeedback`, the same kind of data as
  reported back by the controller, without a sequence number.
- `simplemsg.robot_status` – `RobotStatus`, with the `RobotMode` and
  `TriState` enums. Values outside these enums are kept as plain ints.
- `simplemsg.connection` – `MessageConnection`, an abstract base class for a
  connection that sends and receives raw bytes. It defines `is_connected`,
  `make_connect`, `send_bytes` and `receive_bytes`, and it provides
  `send_and_receive_bytes`.

## Round trip of a payload

Values are unloaded in the opposite order to the one they were loaded in.
Every payload type handles that order itself:

```python
from simplemsg.byte_array import ByteArray
from simplemsg.joint_data import JointData
from simplemsg.joint_traj_pt import JointTrajPt

point = JointTrajPt(sequence=3, position=JointData([0.1, 0.2, 0.3]),
                    velocity=0.5, duration=2.0)

buffer = ByteArray()
buffer.load(point)
payload = buffer.to_bytes()

received = ByteArray(payload).unload(JointTrajPt())
assert received == point
```

Fields that are marked valid take part in the equality test of
`JointTrajPtFull` and `JointFeedback`. Fields that are not marked valid are
left out of it:

```python
from simplemsg.joint_traj_pt_full import JointTrajPtFull, ValidFieldType

pt = JointTrajPtFull(robot_id=0, sequence=1)
pt.set_time(1.5)
time, valid = pt.get_time()          # (1.5, True)
pt.clear_time()
assert not pt.is_valid(ValidFieldType.TIME)
```

## Connections

`MessageConnection` is an interface only. To carry payloads, subclass it
over whatever transport you have. The subclass implements `is_connected`,
`make_connect`, `send_bytes` and `receive_bytes`. It signals failures by
raising `OSError`, and `TimeoutError` when a receive runs out of time.

## What it does not do

This package contains no network transport. It has no TCP or UDP client or
server and opens no sockets. It also has no message framing, headers or
message types on top of the payloads, and no command-line program. It
serializes payloads, and it defines the connection interface that a
transport has to implement.

## Tests

```
pip install .[test]
pytest
```