"""This module defines the exceptions raised by the fastarith package.

Each exception derives from the built-in exception that plain arithmetic raises in
the same situation, so existing handlers for TypeError, ValueError, or ZeroDivisionError
continue to catch them.
"""


class RingMismatchError(TypeError):
    """Operands do not belong to the ring of the modulus."""


class PreconditionError(ValueError):
    """Modulus or array arguments violate the documented contract."""


class NotInvertibleError(ZeroDivisionError):
    """Inverse of a ring element or polynomial does not exist."""
