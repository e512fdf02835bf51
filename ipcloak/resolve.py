# ipcloak/resolve.py
"""
Resolve cloaked addresses the way a permissive BSD inet_aton() parser does.

Accepted shapes are a, a.b, a.b.c and a.b.c.d. Every part is read as hex when
prefixed with 0x/0X, as octal when it has a leading 0, and as decimal
otherwise. All parts but the last are single bytes; the last part fills the
remaining bytes (32, 24, 16 or 8 bits).
"""

from __future__ import annotations

from ipcloak.errors import InvalidAddress
from ipcloak.models import Address

_HEX_DIGITS = set("0123456789abcdefABCDEF")
_OCT_DIGITS = set("01234567")
_DEC_DIGITS = set("0123456789")


def _part_value(part: str, text: str) -> int:
    if part[:2] in ("0x", "0X"):
        digits, base, allowed = part[2:], 16, _HEX_DIGITS
    elif len(part) > 1 and part[0] == "0":
        digits, base, allowed = part[1:], 8, _OCT_DIGITS
    else:
        digits, base, allowed = part, 10, _DEC_DIGITS

    if not digits or not set(digits) <= allowed:
        raise InvalidAddress(f"Cannot resolve {text!r}: bad part {part!r}")
    return int(digits, base)


def resolve(text: str) -> int:
    """
    Return the 32-bit value a permissive parser assigns to `text`.

    Raises:
        InvalidAddress: malformed part or value out of range
    """
    parts = text.split(".")
    if not 1 <= len(parts) <= 4:
        raise InvalidAddress(f"Cannot resolve {text!r}: expected 1 to 4 parts")

    values = [_part_value(part, text) for part in parts]
    *leading, last = values

    dword = 0
    for value in leading:
        if value > 0xFF:
            raise InvalidAddress(f"Cannot resolve {text!r}: {value} does not fit in a byte")
        dword = (dword << 8) | value

    tail_bits = 8 * (4 - len(leading))
    if last >= 1 << tail_bits:
        raise InvalidAddress(f"Cannot resolve {text!r}: {last} does not fit in {tail_bits} bits")

    return (dword << tail_bits) | last


def resolves_to(text: str, address: Address) -> bool:
    try:
        return resolve(text) == address.dword
    except InvalidAddress:
        return False
