# ipcloak/errors.py
"""Exception classes for ipcloak"""


class IpCloakError(Exception):
    """Base class for errors reported by ipcloak"""


class MissingArgument(IpCloakError):
    """Raised when no address was supplied"""


class InvalidAddress(IpCloakError):
    """Raised when a string is not a well-formed IPv4 address"""
