import pytest

from molkit import Atom, AtomGroup, Molecule, Point


def make_atom(x, y, z, symbol, remark="", charge=0.0):
    return Atom(center=Point(x, y, z), charge=charge, symbol=symbol, remark=remark)


@pytest.fixture
def water():
    """Water molecule with no bonds."""
    mol = Molecule("H2O", "Water Molecule")
    mol.add_atom(make_atom(0.0, 0.0, 0.0, "O", "Oxygen Atom"))
    mol.add_atom(make_atom(0.758602, 0.0, 0.504284, "H", "Hydrogen Atom"))
    mol.add_atom(make_atom(0.758602, 0.0, -0.504284, "H", "Hydrogen Atom"))
    return mol


@pytest.fixture
def hydroxyl():
    group = AtomGroup("OH", "Alcohol")
    group.add_atom(make_atom(0.0, 0.0, 0.0, "H", "Hydrogen Atom"))
    group.add_atom(make_atom(1.0, 0.0, 0.0, "O", "Oxygen Atom"))
    return group
