#!/usr/bin/env python3
# src/molkit/core/domain/models/atom_group.py

"""
Domain model representing a named, ordered collection of atoms.
"""

from typing import Iterator, List
import logging
import operator
import numpy as np

from ..exceptions import AtomIndexError, AtomNotFoundError
from ..interfaces.atom_operations import AtomOperations
from .atom import Atom

logger = logging.getLogger(__name__)


class AtomGroup(AtomOperations):
    """Named collection of atoms addressed by insertion position."""

    def __init__(self, name: str = "", remark: str = ""):
        """
        Initialize an empty AtomGroup.

        Args:
            name: Name of the group
            remark: Free-text description
        """
        self.name = name
        self.remark = remark
        self._atoms: List[Atom] = []

    def __len__(self) -> int:
        return len(self._atoms)

    def __iter__(self) -> Iterator[Atom]:
        return (atom.copy() for atom in self._atoms)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, remark={self.remark!r}, "
            f"atoms={len(self._atoms)})"
        )

    def _check_index(self, index: int) -> int:
        """Validate an atom position and return it.

        Raises:
            AtomIndexError: If index is not an integer in [0, number of atoms)
        """
        try:
            index = operator.index(index)
        except TypeError:
            raise AtomIndexError(
                f"Atom index must be an integer, got {index!r}"
            ) from None
        if not 0 <= index < len(self._atoms):
            raise AtomIndexError(
                f"Atom index {index} out of range for {len(self._atoms)} atoms"
            )
        return index

    def add_atom(self, atom: Atom) -> None:
        self._atoms.append(atom.copy())

    def get_number_of_atoms(self) -> int:
        return len(self._atoms)

    def get_atom(self, index: int) -> Atom:
        """
        Get a copy of the atom at a position.

        Args:
            index: Position of the atom

        Returns:
            Copy of the stored atom

        Raises:
            AtomIndexError: If index does not exist
        """
        return self._atoms[self._check_index(index)].copy()

    def get_atoms(self) -> List[Atom]:
        """Get copies of all atoms in insertion order."""
        return [atom.copy() for atom in self._atoms]

    def remove_atom(self, index: int) -> Atom:
        """
        Remove the atom at a position. Later atoms shift down by one.

        Args:
            index: Position of the atom

        Returns:
            The removed atom

        Raises:
            AtomIndexError: If index does not exist
        """
        removed = self._atoms.pop(self._check_index(index))
        logger.debug("Removed atom %d (%s) from %r", index, removed.symbol, self.name)
        return removed

    def index_of(self, atom: Atom) -> int:
        """
        Find the first atom structurally equal to the given one.

        Args:
            atom: Atom to look for; center, charge, symbol and remark must
                all match exactly

        Returns:
            Position of the matching atom

        Raises:
            AtomNotFoundError: If no atom matches
        """
        for index, candidate in enumerate(self._atoms):
            if candidate == atom:
                return index
        raise AtomNotFoundError(f"No atom matching {atom} in {self.name!r}")

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        if not self._atoms:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([atom.center.to_array() for atom in self._atoms])
