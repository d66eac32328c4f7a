#!/usr/bin/env python3
# src/molkit/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular structure.
"""

from dataclasses import dataclass, field, replace

from .point import Point


@dataclass
class Atom:
    """Represents an atom in a molecular structure.

    Two atoms are equal only if every field matches exactly.
    """

    center: Point = field(default_factory=Point)
    charge: float = 0.0
    symbol: str = ""
    remark: str = ""

    def distance_from(self, atom: "Atom") -> float:
        """Distance between the centers of this atom and another."""
        return self.center.distance_from(atom.center)

    def copy(self) -> "Atom":
        """Return an independent copy of this atom."""
        return replace(self)
