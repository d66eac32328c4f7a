#!/usr/bin/env python3
# src/molkit/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from .atom import Atom


class BondType(Enum):
    """Enumeration of possible bond types."""

    SINGLE = auto()
    DOUBLE = auto()
    TRIPLE = auto()
    AROMATIC = auto()
    COORDINATE = auto()
    WEAK = auto()

    @property
    def bond_order(self) -> float:
        """Numeric bond order associated with this bond type."""
        return BOND_ORDERS[self]


BOND_ORDERS = MappingProxyType(
    {
        BondType.SINGLE: 1.0,
        BondType.DOUBLE: 2.0,
        BondType.TRIPLE: 3.0,
        BondType.AROMATIC: 1.5,
        BondType.COORDINATE: 1.0,
        BondType.WEAK: 0.5,
    }
)


@dataclass
class Bond:
    """Represents a chemical bond between two atoms.

    Holds copies of both atoms, so changing a Bond never touches the
    molecule it came from.
    """

    atom_a: Atom
    atom_b: Atom
    bond_type: BondType = BondType.SINGLE

    @property
    def bond_order(self) -> float:
        return self.bond_type.bond_order

    @property
    def length(self) -> float:
        """Distance between the two bonded atoms."""
        return self.atom_a.distance_from(self.atom_b)


@dataclass(frozen=True)
class BondIndex:
    """Bond between two atoms referenced by their position in a molecule.

    A BondIndex is a snapshot: positions are only meaningful for the
    molecule state it was taken from.
    """

    atom_1_idx: int
    atom_2_idx: int
    bond_type: BondType = BondType.SINGLE
