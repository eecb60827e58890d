import pytest

from simplemsg.byte_array import ByteArray
from simplemsg.connection import MessageConnection


class _EchoConnection(MessageConnection):
    """In-memory connection whose replies are whatever was last sent."""

    def __init__(self):
        self.connected = False
        self.sent = []
        self.timeouts = []
        self._pending = b""

    def is_connected(self):
        return self.connected

    def make_connect(self):
        self.connected = True
        return True

    def send_bytes(self, buffer):
        if not self.connected:
            raise ConnectionError("not connected")
        data = buffer.to_bytes()
        self.sent.append(data)
        self._pending += data

    def receive_bytes(self, num_bytes, timeout_ms=-1):
        self.timeouts.append(timeout_ms)
        if len(self._pending) < num_bytes:
            raise TimeoutError("not enough data")
        data, self._pending = self._pending[:num_bytes], self._pending[num_bytes:]
        return ByteArray(data)


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        MessageConnection()


def test_send_and_receive_returns_reply():
    conn = _EchoConnection()
    conn.make_connect()
    assert conn.is_connected()
    reply = conn.send_and_receive_bytes(ByteArray(b"ping"), 4, 100)
    assert reply.to_bytes() == b"ping"
    assert conn.sent == [b"ping"]
    assert conn.timeouts == [100]


def test_default_timeout_waits_indefinitely():
    conn = _EchoConnection()
    conn.make_connect()
    conn.send_and_receive_bytes(ByteArray(b"ab"), 2)
    assert conn.timeouts == [-1]


def test_send_failure_propagates_without_receive():
    conn = _EchoConnection()
    with pytest.raises(ConnectionError):
        conn.send_and_receive_bytes(ByteArray(b"x"), 1)
    assert conn.timeouts == []


def test_receive_timeout_propagates():
    conn = _EchoConnection()
    conn.make_connect()
    with pytest.raises(TimeoutError):
        conn.send_and_receive_bytes(ByteArray(b"x"), 5, 10)
    assert conn.sent == [b"x"]