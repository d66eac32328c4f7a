#!/usr/bin/env python3
# src/molkit/core/domain/models/periodic_table.py

"""
Fixed table of atomic properties: atomic number, symbol, weight and
covalent radius.

Elements up to Ar use the values below; heavier elements are taken from the
RDKit periodic table once, at import.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Union
from rdkit import Chem

from ..exceptions import ElementNotFoundError


@dataclass(frozen=True)
class Element:
    """Properties of a chemical element."""

    number: int
    symbol: str
    weight: float
    covalent_radius: float  # picometres

    @property
    def covalent_radius_angstrom(self) -> float:
        return self.covalent_radius / 100.0


_ELEMENT_DATA = (
    (1, "H", 1.00784, 32),
    (2, "He", 4.002602, 46),
    (3, "Li", 6.938, 133),
    (4, "Be", 9.0121831, 102),
    (5, "B", 10.806, 85),
    (6, "C", 12.0096, 75),
    (7, "N", 14.00643, 71),
    (8, "O", 15.99903, 63),
    (9, "F", 18.998403163, 64),
    (10, "Ne", 20.1797, 67),
    (11, "Na", 22.98976928, 155),
    (12, "Mg", 24.304, 139),
    (13, "Al", 26.9815385, 126),
    (14, "Si", 28.084, 116),
    (15, "P", 30.973761998, 111),
    (16, "S", 32.059, 103),
    (17, "Cl", 35.446, 99),
    (18, "Ar", 39.948, 96),
)

LAST_ATOMIC_NUMBER = 103


def _build_elements() -> Dict[int, Element]:
    elements = {
        number: Element(number, symbol, weight, radius)
        for number, symbol, weight, radius in _ELEMENT_DATA
    }

    rdkit_table = Chem.GetPeriodicTable()
    for number in range(len(elements) + 1, LAST_ATOMIC_NUMBER + 1):
        elements[number] = Element(
            number,
            rdkit_table.GetElementSymbol(number),
            float(rdkit_table.GetAtomicWeight(number)),
            round(rdkit_table.GetRcovalent(number) * 100),
        )
    return elements


ELEMENTS = MappingProxyType(_build_elements())

_BY_SYMBOL = MappingProxyType(
    {element.symbol.upper(): element for element in ELEMENTS.values()}
)


def get_element(key: Union[int, str]) -> Element:
    """
    Look up an element by atomic number or symbol.

    Args:
        key: Atomic number, or element symbol (case-insensitive)

    Returns:
        Element properties

    Raises:
        ElementNotFoundError: If the element is not in the table
    """
    if isinstance(key, str):
        element = _BY_SYMBOL.get(key.strip().upper())
    else:
        element = ELEMENTS.get(key)
    if element is None:
        raise ElementNotFoundError(f"Unknown element: {key!r}")
    return element
