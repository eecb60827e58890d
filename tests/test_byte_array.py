import pytest

from simplemsg.byte_array import ByteArray, ByteArrayError, Serializable


class _Pair(Serializable):
    def __init__(self, first=0, second=0):
        self.first = first
        self.second = second

    def load(self, buffer):
        buffer.load_int(self.first)
        buffer.load_int(self.second)

    def unload(self, buffer):
        self.second = buffer.unload_int()
        self.first = buffer.unload_int()

    def byte_length(self):
        return 8


def test_int_little_endian_wire_bytes():
    buf = ByteArray()
    buf.load_int(1)
    assert buf.to_bytes() == b"\x01\x00\x00\x00"


def test_int_byte_swapped_wire_bytes():
    buf = ByteArray(byte_swapping=True)
    buf.load_int(1)
    assert buf.to_bytes() == b"\x00\x00\x00\x01"


def test_real_wire_bytes():
    buf = ByteArray()
    buf.load_real(1.0)
    assert bytes(buf) == b"\x00\x00\x80\x3f"


def test_unload_is_last_in_first_out():
    buf = ByteArray()
    buf.load_int(1)
    buf.load_int(2)
    assert buf.unload_int() == 2
    assert buf.unload_int() == 1
    assert len(buf) == 0


def test_unload_front_is_first_in_first_out():
    buf = ByteArray()
    buf.load_int(7)
    buf.load_real(2.5)
    assert buf.unload_front_int() == 7
    assert buf.unload_front_real() == 2.5
    assert len(buf) == 0


@pytest.mark.parametrize("swap", [False, True])
def test_round_trip_values(swap):
    buf = ByteArray(byte_swapping=swap)
    buf.load_int(-123456)
    buf.load_real(-0.25)
    buf.load_bool(True)
    assert buf.unload_bool() is True
    assert buf.unload_real() == -0.25
    assert buf.unload_int() == -123456


def test_swapping_reverses_each_value():
    plain = ByteArray()
    swapped = ByteArray(byte_swapping=True)
    plain.load_int(305419896)
    swapped.load_int(305419896)
    assert plain.to_bytes() == swapped.to_bytes()[::-1]


def test_unload_too_many_bytes_raises():
    buf = ByteArray(b"ab")
    with pytest.raises(ByteArrayError):
        buf.unload_int()
    assert buf.to_bytes() == b"ab"


def test_unload_front_too_many_bytes_raises():
    buf = ByteArray(b"abc")
    with pytest.raises(ByteArrayError):
        buf.unload_front_real()


def test_max_size_exceeded_raises():
    buf = ByteArray(max_size=6)
    buf.load_int(3)
    with pytest.raises(ByteArrayError):
        buf.load_int(4)
    assert len(buf) == 4


def test_initial_data_larger_than_max_size_raises():
    with pytest.raises(ByteArrayError):
        ByteArray(b"abcdef", max_size=3)


def test_copy_from_replaces_contents():
    src = ByteArray(b"hello")
    dest = ByteArray(b"xyz")
    dest.copy_from(src)
    assert dest.to_bytes() == b"hello"
    src.load_bytes(b"!")
    assert dest.to_bytes() == b"hello"


def test_copy_from_empty_keeps_contents():
    dest = ByteArray(b"xyz")
    dest.copy_from(ByteArray())
    assert dest.to_bytes() == b"xyz"


def test_unload_into_moves_tail_in_order():
    src = ByteArray(b"abcdef")
    dest = ByteArray(b"xy")
    src.unload_into(dest, 2)
    assert dest.to_bytes() == b"xyef"
    assert src.to_bytes() == b"abcd"


def test_unload_bytes_zero_returns_empty():
    buf = ByteArray(b"abc")
    assert buf.unload_bytes(0) == b""
    assert buf.to_bytes() == b"abc"


def test_load_byte_array_appends():
    buf = ByteArray(b"ab")
    buf.load(ByteArray(b"cd"))
    assert buf.to_bytes() == b"abcd"


def test_load_dispatches_on_type():
    buf = ByteArray()
    buf.load(5)
    buf.load(1.5)
    buf.load(False)
    assert buf.unload_bool() is False
    assert buf.unload_real() == 1.5
    assert buf.unload_int() == 5


def test_serializable_round_trip():
    buf = ByteArray()
    buf.load(_Pair(10, 20))
    assert len(buf) == _Pair().byte_length()
    result = buf.unload(_Pair())
    assert (result.first, result.second) == (10, 20)


def test_int_out_of_range_raises():
    buf = ByteArray()
    with pytest.raises(ByteArrayError):
        buf.load_int(2 ** 40)
    assert len(buf) == 0


def test_load_unsupported_type_raises():
    with pytest.raises(TypeError):
        ByteArray().load("text")


def test_unload_into_non_serializable_raises():
    with pytest.raises(TypeError):
        ByteArray(b"abcd").unload(3)


def test_clear_empties_buffer():
    buf = ByteArray(b"abcd")
    buf.clear()
    assert len(buf) == 0
    assert buf.to_bytes() == b""