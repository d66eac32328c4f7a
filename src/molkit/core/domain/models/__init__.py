"""Domain model classes."""

from .point import Point
from .atom import Atom
from .bond import Bond, BondIndex, BondType, BOND_ORDERS
from .atom_group import AtomGroup
from .molecule import Molecule, SINGLE_BOND_DIST_THRESHOLD, COVALENT_BOND_SCALE
from .periodic_table import Element, ELEMENTS, get_element

__all__ = [
    "Point",
    "Atom",
    "Bond",
    "BondIndex",
    "BondType",
    "BOND_ORDERS",
    "AtomGroup",
    "Molecule",
    "SINGLE_BOND_DIST_THRESHOLD",
    "COVALENT_BOND_SCALE",
    "Element",
    "ELEMENTS",
    "get_element",
]
