"""Binary message payloads and a connection interface for robot controllers."""

__version__ = "0.1.0"