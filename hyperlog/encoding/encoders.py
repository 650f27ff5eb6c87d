"""
Message payload encoders.

Keys and values of produced messages are anything that can turn itself
into bytes. length() lets the producer size batches without encoding
twice and must always equal len(encode()).
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Encoder(Protocol):

    def encode(self) -> bytes:
        ...

    def length(self) -> int:
        ...


@dataclass(slots=True, frozen=True)
class StringEncoder:
    """Encodes a str as UTF-8."""

    value: str

    def encode(self) -> bytes:
        return self.value.encode("utf-8")

    def length(self) -> int:
        # Byte length, not character count.
        return len(self.encode())

    def __len__(self) -> int:
        return self.length()


@dataclass(slots=True, frozen=True)
class ByteEncoder:
    """Passes raw bytes through unchanged."""

    value: bytes

    def encode(self) -> bytes:
        return self.value

    def length(self) -> int:
        return len(self.value)

    def __len__(self) -> int:
        return self.length()
