"""
Error Taxonomy
==============
Exceptions raised by the computational core.

Each class also derives from the matching builtin (KeyError, ValueError,
ArithmeticError) so callers that only know the builtins still catch them.
"""
from __future__ import annotations


class PahVaporError(Exception):
    """Base class for all errors raised by pahvapor."""


class CompoundNotFoundError(PahVaporError, KeyError):
    """A compound name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Compound '{self.name}' not found in registry."


class DomainUndefinedError(PahVaporError, ArithmeticError):
    """The Antoine equation has no finite value for the given input."""


class InvalidArgumentError(PahVaporError, ValueError):
    """A caller passed a value outside the operation's contract."""


class InvalidRangeError(InvalidArgumentError):
    """A lower bound is not strictly below its upper bound."""
