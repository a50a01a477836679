"""Bit-level wire format for messages carried by two signals.

A message is sent as its byte length (32 bits), then each byte of the
text, then a terminating zero byte. Every value goes least significant
bit first. A 0 bit travels as SIGUSR1 and a 1 bit as SIGUSR2.
"""

from __future__ import annotations

import signal
from typing import Iterator

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2

LENGTH_BITS = 32
BYTE_BITS = 8


def _bits(value: int, width: int) -> Iterator[int]:
    for shift in range(width):
        yield (value >> shift) & 1


def encode(text: str | bytes) -> Iterator[int]:
    """Yield the bits that carry *text*: length, bytes, then a zero byte."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if 0 in data:
        raise ValueError("message must not contain a NUL character")
    yield from _bits(len(data) & 0xFFFFFFFF, LENGTH_BITS)
    for byte in data:
        yield from _bits(byte, BYTE_BITS)
    yield from _bits(0, BYTE_BITS)


class Decoder:
    """Rebuild messages from a stream of bits, one bit at a time."""

    def __init__(self) -> None:
        self.length: int | None = None
        self._value = 0
        self._bit = 0
        self._data = bytearray()

    def _next_value(self) -> int:
        value = self._value
        self._value = 0
        self._bit = 0
        return value

    def feed(self, bit: int) -> str | None:
        """Take one bit; return the message once its terminating byte arrives."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if bit:
            self._value |= 1 << self._bit

        if self.length is None:
            if self._bit == LENGTH_BITS - 1:
                self.length = self._next_value()
            else:
                self._bit += 1
            return None

        if self._bit < BYTE_BITS - 1:
            self._bit += 1
            return None

        byte = self._next_value()
        if byte:
            self._data.append(byte)
            return None

        message = self._data.decode("utf-8", errors="replace")
        self._data.clear()
        self.length = None
        return message