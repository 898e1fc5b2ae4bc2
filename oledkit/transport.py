"""Byte transports that carry SSD1306 traffic to a device on an I2C bus."""

from __future__ import annotations

from collections.abc import Callable, Iterable

MAX_ADDRESS = 0x7F
COMMAND_CONTROL = 0x00

SendFunc = Callable[[int, bytes], None]


def _validate(address: int, data: Iterable[int]) -> bytes:
    if not 0 <= address <= MAX_ADDRESS:
        raise ValueError(f"I2C address {address:#x} is not a 7-bit address")
    payload = bytes(data)
    if not payload:
        raise ValueError("nothing to write")
    return payload


class Transport:
    """Sends whole I2C write transactions through a callable.

    ``send`` receives the 7-bit slave address and the bytes of one
    transaction, control byte first.
    """

    def __init__(self, send: SendFunc) -> None:
        self._send = send

    def write(self, address: int, data: Iterable[int]) -> None:
        """Write one transaction to the slave at ``address``."""
        self._send(address, _validate(address, data))


class RecordingTransport(Transport):
    """A transport that keeps every transaction in memory instead of sending it."""

    def __init__(self) -> None:
        self.writes: list[tuple[int, bytes]] = []
        super().__init__(self._record)

    def _record(self, address: int, payload: bytes) -> None:
        self.writes.append((address, payload))

    def write(self, address: int, data: Iterable[int]) -> None:
        """Record one transaction."""
        self._record(address, _validate(address, data))

    def commands(self) -> list[int]:
        """Return the command bytes of all recorded command transactions, in order."""
        return [
            byte
            for _, payload in self.writes
            if payload[0] == COMMAND_CONTROL
            for byte in payload[1:]
        ]

    def clear(self) -> None:
        """Forget everything recorded so far."""
        self.writes.clear()