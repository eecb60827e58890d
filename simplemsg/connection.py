"""Interface for connections that carry simple message bytes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from simplemsg.byte_array import ByteArray


class MessageConnection(ABC):
    """A data connection able to send and receive raw bytes.

    The connection is established explicitly with ``make_connect``; for
    connectionless transports that step may do little. Failures are
    reported by raising ``OSError`` (a ``TimeoutError`` when a receive
    runs out of time).
    """

    @abstractmethod
    def is_connected(self) -> bool:
        """True while the connection is established."""

    @abstractmethod
    def make_connect(self):
        """Establish the connection to the remote side."""

    @abstractmethod
    def send_bytes(self, buffer: ByteArray) -> None:
        """Send the whole contents of ``buffer``."""

    @abstractmethod
    def receive_bytes(self, num_bytes: int, timeout_ms: int = -1) -> ByteArray:
        """Receive exactly ``num_bytes`` bytes.

        A negative ``timeout_ms`` waits indefinitely.
        """

    def send_and_receive_bytes(self, buffer: ByteArray, num_bytes: int,
                               timeout_ms: int = -1) -> ByteArray:
        """Send ``buffer`` and return the ``num_bytes``-byte reply."""
        self.send_bytes(buffer)
        return self.receive_bytes(num_bytes, timeout_ms)