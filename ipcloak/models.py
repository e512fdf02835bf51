# ipcloak/models.py
from __future__ import annotations

import socket
import struct
from dataclasses import dataclass

from ipcloak.errors import InvalidAddress

MAX_DWORD = 0xFFFFFFFF


@dataclass(frozen=True)
class Address:
    dword: int  # 32-bit value, network byte order

    @classmethod
    def from_string(cls, text: str) -> "Address":
        """
        Parse a dotted-quad IPv4 address ("a.b.c.d", each 0-255).

        Shorthand forms, hex/octal octets and surrounding whitespace are
        rejected, exactly as socket.inet_pton(AF_INET, ...) rejects them.
        """
        try:
            packed = socket.inet_pton(socket.AF_INET, text)
        except (OSError, TypeError, ValueError) as e:
            raise InvalidAddress(f"Invalid IP address: {text!r}") from e
        (dword,) = struct.unpack("!I", packed)
        return cls(dword)

    @classmethod
    def from_int(cls, value: int) -> "Address":
        if not 0 <= value <= MAX_DWORD:
            raise InvalidAddress(f"Value out of IPv4 range: {value}")
        return cls(value)

    @property
    def octets(self) -> tuple[int, int, int, int]:
        return tuple(struct.pack("!I", self.dword))

    @property
    def u16(self) -> int:
        """Last two octets collapsed into one integer."""
        return self.dword & 0xFFFF

    @property
    def u24(self) -> int:
        """Last three octets collapsed into one integer."""
        return self.dword & 0xFFFFFF

    def __str__(self) -> str:
        return socket.inet_ntop(socket.AF_INET, struct.pack("!I", self.dword))
