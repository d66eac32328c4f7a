import logging

import networkx as nx
import numpy as np
import pytest
from Bio.PDB.Atom import Atom as PDBAtom
from rdkit import Chem

from molkit import Atom, BondType, Molecule, Point
from molkit.infrastructure.adapters import (
    BioPythonAdapter,
    NetworkXAdapter,
    RDKitAdapter,
)


def test_to_graph(water):
    water.compute_simple_bonds()
    water.set_bond_type(0, 2, BondType.AROMATIC)

    graph = NetworkXAdapter().to_graph(water)

    assert isinstance(graph, nx.Graph)
    assert graph.graph["name"] == "H2O"
    assert sorted(graph.nodes) == [0, 1, 2]
    assert graph.nodes[0]["element"] == "O"
    assert graph.nodes[1]["coord"] == (0.758602, 0.0, 0.504284)
    assert sorted(graph.edges) == [(0, 1), (0, 2)]
    assert graph.edges[0, 2]["bond_type"] == "AROMATIC"
    assert graph.edges[0, 2]["bond_order"] == 1.5


def test_graph_round_trip(water):
    water.add_bond(0, 1, BondType.DOUBLE)
    adapter = NetworkXAdapter()

    rebuilt = adapter.from_graph(adapter.to_graph(water))

    assert rebuilt.name == water.name
    assert rebuilt.get_atoms() == water.get_atoms()
    assert rebuilt.get_bonds() == water.get_bonds()


def test_from_graph_defaults():
    graph = nx.Graph()
    graph.add_node("a", element="C", coord=(0.0, 0.0, 0.0))
    graph.add_node("b", element="O", coord=(1.2, 0.0, 0.0))
    graph.add_edge("a", "b")

    mol = NetworkXAdapter().from_graph(graph)

    assert mol.get_number_of_atoms() == 2
    assert mol.get_bond_type(0, 1) is BondType.SINGLE
    assert mol.get_atom(1).center == Point(1.2, 0.0, 0.0)


def test_to_mol(water):
    water.add_bond(0, 1, BondType.SINGLE)
    water.add_bond(0, 2, BondType.COORDINATE)

    mol = RDKitAdapter().to_mol(water)

    assert mol.GetNumAtoms() == 3
    assert [atom.GetSymbol() for atom in mol.GetAtoms()] == ["O", "H", "H"]
    assert mol.GetBondBetweenAtoms(0, 1).GetBondType() == Chem.BondType.SINGLE
    assert mol.GetBondBetweenAtoms(0, 2).GetBondType() == Chem.BondType.DATIVE
    assert mol.GetProp("_Name") == "H2O"

    position = mol.GetConformer().GetAtomPosition(2)
    assert position.x == pytest.approx(0.758602)
    assert position.z == pytest.approx(-0.504284)


def test_to_mol_keeps_charges_and_aromatic_bonds(water):
    water.add_bond(0, 1, BondType.AROMATIC)
    water.add_bond(0, 2, BondType.WEAK)

    mol = RDKitAdapter().to_mol(water)

    assert mol.GetBondBetweenAtoms(0, 1).GetIsAromatic()
    assert mol.GetBondBetweenAtoms(0, 2).GetBondType() == Chem.BondType.HYDROGEN
    assert mol.GetAtomWithIdx(0).GetDoubleProp("charge") == 0.0


def _pdb_atom(name, coord, serial, element, charge=None):
    return PDBAtom(
        name,
        np.array(coord, "f"),
        0.0,
        1.0,
        " ",
        f" {name:<3}",
        serial,
        element=element,
        pqr_charge=charge,
    )


def test_from_pdb_atoms():
    atoms = [
        _pdb_atom("O", [0.0, 0.0, 0.0], 1, "O", charge=-0.834),
        _pdb_atom("H1", [0.758602, 0.0, 0.504284], 2, "H", charge=0.417),
        _pdb_atom("H2", [0.758602, 0.0, -0.504284], 3, "H", charge=0.417),
    ]

    mol = BioPythonAdapter().from_atoms(atoms, name="HOH", perceive_bonds=True)

    assert mol.name == "HOH"
    assert mol.get_number_of_atoms() == 3
    assert mol.get_atom(0).symbol == "O"
    assert mol.get_atom(0).charge == pytest.approx(-0.834)
    assert mol.get_atom(1).remark == "H1"
    assert mol.get_atom(1).center.x == pytest.approx(0.758602)
    assert mol.get_number_of_bonds() == 2
    assert mol.has_bond(0, 1) and mol.has_bond(0, 2)


def test_from_pdb_atoms_two_letter_element():
    atoms = [_pdb_atom("CL", [0.0, 0.0, 0.0], 1, "CL")]

    mol = BioPythonAdapter().from_atoms(atoms)

    assert mol.get_atom(0).symbol == "Cl"
    assert mol.get_atom(0).charge == 0.0
    assert mol.get_number_of_bonds() == 0


def test_from_pdb_atoms_with_metal_ion():
    atoms = [
        _pdb_atom("ZN", [0.0, 0.0, 0.0], 1, "ZN", charge=2.0),
        _pdb_atom("O", [2.0, 0.0, 0.0], 2, "O"),
    ]

    mol = BioPythonAdapter().from_atoms(atoms, name="ZN", perceive_bonds=True)

    assert [atom.symbol for atom in mol] == ["Zn", "O"]
    assert mol.get_atom(0).charge == 2.0


def test_from_pdb_atoms_skips_perception_for_unknown_element(caplog):
    unknown = _pdb_atom("Q1", [0.0, 0.0, 0.0], 1, "C")
    unknown.element = ""
    atoms = [unknown, _pdb_atom("H1", [0.5, 0.0, 0.0], 2, "H")]

    with caplog.at_level(logging.WARNING):
        mol = BioPythonAdapter().from_atoms(atoms, name="odd", perceive_bonds=True)

    assert mol.get_number_of_atoms() == 2
    assert mol.get_atom(0).symbol == ""
    assert mol.get_number_of_bonds() == 0
    assert "Skipping bond perception" in caplog.text


def test_to_mol_unknown_symbol_becomes_dummy_atom(caplog):
    mol = Molecule("blank", "")
    mol.add_atom(Atom())
    mol.add_atom(Atom(center=Point(1.0, 0.0, 0.0), symbol="Qq"))
    mol.add_atom(Atom(center=Point(2.0, 0.0, 0.0), symbol="Zn"))

    with caplog.at_level(logging.WARNING):
        rd_mol = RDKitAdapter().to_mol(mol)

    assert [atom.GetAtomicNum() for atom in rd_mol.GetAtoms()] == [0, 0, 30]
    assert "unknown element" in caplog.text


def test_biopython_molecule_converts_to_rdkit():
    unknown = _pdb_atom("Q1", [0.0, 0.0, 0.0], 1, "C")
    unknown.element = ""
    mol = BioPythonAdapter().from_atoms([unknown, _pdb_atom("O", [1.0, 0.0, 0.0], 2, "O")])

    rd_mol = RDKitAdapter().to_mol(mol)

    assert rd_mol.GetNumAtoms() == 2
    assert rd_mol.GetAtomWithIdx(1).GetSymbol() == "O"


def test_to_mol_marks_aromatic_atoms(water):
    water.add_bond(0, 1, BondType.AROMATIC)

    rd_mol = RDKitAdapter().to_mol(water)

    assert rd_mol.GetAtomWithIdx(0).GetIsAromatic()
    assert rd_mol.GetAtomWithIdx(1).GetIsAromatic()
    assert not rd_mol.GetAtomWithIdx(2).GetIsAromatic()
