"""Core domain models, interfaces and exceptions."""

from .models import (
    Point,
    Atom,
    Bond,
    BondIndex,
    BondType,
    AtomGroup,
    Molecule,
    Element,
    get_element,
)
from .interfaces import AtomOperations
from .exceptions import (
    MolkitError,
    AtomIndexError,
    AtomNotFoundError,
    BondNotFoundError,
    InvalidBondError,
    ElementNotFoundError,
)

__all__ = [
    "Point",
    "Atom",
    "Bond",
    "BondIndex",
    "BondType",
    "AtomGroup",
    "Molecule",
    "Element",
    "get_element",
    "AtomOperations",
    "MolkitError",
    "AtomIndexError",
    "AtomNotFoundError",
    "BondNotFoundError",
    "InvalidBondError",
    "ElementNotFoundError",
]
