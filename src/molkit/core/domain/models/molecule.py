#!/usr/bin/env python3
# src/molkit/core/domain/models/molecule.py

"""
Domain model representing a molecule: an ordered list of atoms connected by
typed bonds.
"""

from itertools import count
from typing import Callable, Dict, List, Tuple
import logging

from ..exceptions import BondNotFoundError, InvalidBondError
from .atom import Atom
from .atom_group import AtomGroup
from .bond import Bond, BondIndex, BondType
from .periodic_table import get_element

logger = logging.getLogger(__name__)

SINGLE_BOND_DIST_THRESHOLD = 1.0
COVALENT_BOND_SCALE = 1.2

_BondKey = Tuple[int, int]


class Molecule(AtomGroup):
    """Atoms plus the bonds between them.

    Atoms are addressed by position, as in AtomGroup. Internally every atom
    also carries an id that is never reused, and bonds are keyed by the
    (smaller id, larger id) pair. This means:

    - bonds are undirected: (i, j) and (j, i) name the same bond;
    - there is at most one bond per atom pair;
    - removing an atom removes its bonds, and the remaining bonds still
      connect the same atoms after later positions shift down.
    """

    def __init__(self, name: str = "", remark: str = ""):
        """
        Initialize an empty Molecule.

        Args:
            name: Name of the molecule
            remark: Free-text description
        """
        super().__init__(name, remark)
        self._atom_ids: List[int] = []
        self._id_counter = count()
        self._bonds: Dict[_BondKey, BondType] = {}

    def __repr__(self) -> str:
        return (
            f"Molecule(name={self.name!r}, remark={self.remark!r}, "
            f"atoms={len(self._atoms)}, bonds={len(self._bonds)})"
        )

    # Atoms

    def add_atom(self, atom: Atom) -> None:
        super().add_atom(atom)
        self._atom_ids.append(next(self._id_counter))

    def remove_atom(self, index: int) -> Atom:
        """
        Remove the atom at a position along with every bond it takes part in.

        Args:
            index: Position of the atom

        Returns:
            The removed atom

        Raises:
            AtomIndexError: If index does not exist
        """
        removed = super().remove_atom(index)
        atom_id = self._atom_ids.pop(index)

        stale = [key for key in self._bonds if atom_id in key]
        for key in stale:
            del self._bonds[key]
        if stale:
            logger.debug(
                "Removed %d bond(s) attached to atom %d of %r",
                len(stale),
                index,
                self.name,
            )
        return removed

    # Bonds

    def _bond_key(self, atom_1_idx: int, atom_2_idx: int) -> _BondKey:
        id_1 = self._atom_ids[self._check_index(atom_1_idx)]
        id_2 = self._atom_ids[self._check_index(atom_2_idx)]
        return (id_1, id_2) if id_1 <= id_2 else (id_2, id_1)

    def _find_bond(self, atom_1_idx: int, atom_2_idx: int) -> _BondKey:
        key = self._bond_key(atom_1_idx, atom_2_idx)
        if key not in self._bonds:
            raise BondNotFoundError(
                f"No bond between atoms {atom_1_idx} and {atom_2_idx} in {self.name!r}"
            )
        return key

    def has_bond(self, atom_1_idx: int, atom_2_idx: int) -> bool:
        """Check whether two atoms are bonded."""
        return self._bond_key(atom_1_idx, atom_2_idx) in self._bonds

    def add_bond(
        self, atom_1_idx: int, atom_2_idx: int, bond_type: BondType = BondType.SINGLE
    ) -> None:
        """
        Bond two atoms. If they are already bonded, only the bond type changes.

        Args:
            atom_1_idx: Position of the first atom
            atom_2_idx: Position of the second atom
            bond_type: Type of the bond

        Raises:
            AtomIndexError: If either position does not exist
            InvalidBondError: If both positions are the same atom
        """
        key = self._bond_key(atom_1_idx, atom_2_idx)
        if key[0] == key[1]:
            raise InvalidBondError(f"Cannot bond atom {atom_1_idx} to itself")
        if key in self._bonds:
            logger.debug(
                "Replacing %s bond between %d and %d with %s",
                self._bonds[key].name,
                atom_1_idx,
                atom_2_idx,
                bond_type.name,
            )
        self._bonds[key] = bond_type

    def get_number_of_bonds(self) -> int:
        return len(self._bonds)

    def get_bond_index(self, atom_1_idx: int, atom_2_idx: int) -> int:
        """
        Get the position of a bond in the bond list.

        Args:
            atom_1_idx: Position of one atom
            atom_2_idx: Position of the other atom, in either order

        Returns:
            Position of the bond in get_bonds()

        Raises:
            AtomIndexError: If either atom position does not exist
            BondNotFoundError: If the atoms are not bonded
        """
        key = self._find_bond(atom_1_idx, atom_2_idx)
        return list(self._bonds).index(key)

    def get_bonds(self) -> List[BondIndex]:
        """Get all bonds in insertion order, lower atom position first."""
        positions = {atom_id: pos for pos, atom_id in enumerate(self._atom_ids)}
        return [
            BondIndex(positions[id_1], positions[id_2], bond_type)
            for (id_1, id_2), bond_type in self._bonds.items()
        ]

    def get_bond(self, atom_1_idx: int, atom_2_idx: int) -> Bond:
        """
        Get the bond between two atoms.

        Args:
            atom_1_idx: Position of the atom returned as atom_a
            atom_2_idx: Position of the atom returned as atom_b

        Returns:
            Bond holding copies of both atoms

        Raises:
            AtomIndexError: If either atom position does not exist
            BondNotFoundError: If the atoms are not bonded
        """
        key = self._find_bond(atom_1_idx, atom_2_idx)
        return Bond(
            atom_a=self.get_atom(atom_1_idx),
            atom_b=self.get_atom(atom_2_idx),
            bond_type=self._bonds[key],
        )

    def get_bond_type(self, atom_1_idx: int, atom_2_idx: int) -> BondType:
        return self._bonds[self._find_bond(atom_1_idx, atom_2_idx)]

    def set_bond_type(
        self, atom_1_idx: int, atom_2_idx: int, bond_type: BondType
    ) -> None:
        """Change the type of an existing bond.

        Raises:
            BondNotFoundError: If the atoms are not bonded
        """
        self._bonds[self._find_bond(atom_1_idx, atom_2_idx)] = bond_type

    def remove_bond(self, atom_1_idx: int, atom_2_idx: int) -> None:
        """Remove the bond between two atoms.

        Raises:
            BondNotFoundError: If the atoms are not bonded
        """
        del self._bonds[self._find_bond(atom_1_idx, atom_2_idx)]

    def clear_bonds(self) -> None:
        self._bonds.clear()

    def compute_bond_order(self, atom_1_idx: int, atom_2_idx: int) -> float:
        """Bond order of the bond between two atoms (e.g. 2.0 for DOUBLE)."""
        return self.get_bond_type(atom_1_idx, atom_2_idx).bond_order

    # Bond perception

    def compute_simple_bonds(
        self, threshold: float = SINGLE_BOND_DIST_THRESHOLD
    ) -> int:
        """
        Add a SINGLE bond between every pair of atoms closer than threshold.

        Pairs that are already bonded keep their existing bond, so calling
        this repeatedly does not duplicate bonds.

        Args:
            threshold: Distance below which two atoms are bonded, in the
                units of the atom coordinates

        Returns:
            Number of bonds added
        """
        return self._perceive_bonds(lambda i, j: threshold)

    def compute_covalent_bonds(self, scale: float = COVALENT_BOND_SCALE) -> int:
        """
        Add a SINGLE bond between atoms closer than the scaled sum of their
        covalent radii. Coordinates are taken to be in Angstrom.

        Args:
            scale: Factor applied to the sum of covalent radii

        Returns:
            Number of bonds added

        Raises:
            ElementNotFoundError: If an atom symbol is not a known element
        """
        radii = [
            get_element(atom.symbol).covalent_radius_angstrom for atom in self._atoms
        ]
        return self._perceive_bonds(lambda i, j: scale * (radii[i] + radii[j]))

    def _perceive_bonds(self, cutoff: Callable[[int, int], float]) -> int:
        added = 0
        n_atoms = len(self._atoms)

        for i in range(n_atoms):
            for j in range(i + 1, n_atoms):
                dist = self._atoms[i].distance_from(self._atoms[j])
                if dist < cutoff(i, j) and not self.has_bond(i, j):
                    self.add_bond(i, j, BondType.SINGLE)
                    added += 1
                    logger.debug("Added bond between %d and %d (%.4f)", i, j, dist)

        logger.info(
            "Perceived %d new bond(s) in %r (%d atoms, %d bonds total)",
            added,
            self.name,
            n_atoms,
            len(self._bonds),
        )
        return added
