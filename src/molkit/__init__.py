"""In-memory molecular structure model: points, atoms, atom groups and
molecules with typed bonds."""

from .core.domain import (
    Point,
    Atom,
    Bond,
    BondIndex,
    BondType,
    AtomGroup,
    Molecule,
    Element,
    get_element,
    AtomOperations,
    MolkitError,
    AtomIndexError,
    AtomNotFoundError,
    BondNotFoundError,
    InvalidBondError,
    ElementNotFoundError,
)

__version__ = "0.1.0"

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
