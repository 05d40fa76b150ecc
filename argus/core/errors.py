from __future__ import annotations


class ArgusError(Exception):
    pass


class DeviceError(ArgusError):
    """The capture device could not be opened or read."""


class HandlerError(ArgusError):
    """A motion handler failed to process an event."""


class UnknownHandlerError(ArgusError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown handler: {name}")
        self.name = name
