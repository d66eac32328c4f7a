"""Interface for containers holding an ordered list of atoms."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.atom import Atom


class AtomOperations(ABC):
    """
    Abstract base class for position-addressed atom containers.

    Atoms are addressed by their insertion position. Implementations hand
    out copies, never the stored atoms themselves.
    """

    @abstractmethod
    def add_atom(self, atom: "Atom") -> None:
        """Append an atom."""
        pass

    @abstractmethod
    def get_atom(self, index: int) -> "Atom":
        """Return a copy of the atom at index."""
        pass

    @abstractmethod
    def remove_atom(self, index: int) -> "Atom":
        """Remove the atom at index and return it."""
        pass

    @abstractmethod
    def index_of(self, atom: "Atom") -> int:
        """Position of the first atom structurally equal to atom."""
        pass

    @abstractmethod
    def get_number_of_atoms(self) -> int:
        """Number of atoms held."""
        pass
