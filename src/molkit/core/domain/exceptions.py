#!/usr/bin/env python3
# src/molkit/core/domain/exceptions.py

"""
Exceptions raised by the molecular structure model.
"""


class MolkitError(Exception):
    """Base class for all molkit errors."""


class AtomIndexError(MolkitError, IndexError):
    """Raised when an atom position does not exist in the container."""


class AtomNotFoundError(MolkitError, LookupError):
    """Raised when no atom structurally matches the requested one."""


class BondNotFoundError(MolkitError, LookupError):
    """Raised when no bond exists between the requested atom pair."""


class InvalidBondError(MolkitError, ValueError):
    """Raised when a bond cannot be formed between the given atoms."""


class ElementNotFoundError(MolkitError, KeyError):
    """Raised when an element is missing from the periodic table."""
