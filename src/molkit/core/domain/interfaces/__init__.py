"""Domain interfaces."""

from .atom_operations import AtomOperations

__all__ = ["AtomOperations"]
