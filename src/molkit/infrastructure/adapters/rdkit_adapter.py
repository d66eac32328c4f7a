"""Adapter for exporting molecules to RDKit."""

from types import MappingProxyType
import logging
from rdkit import Chem
from rdkit.Geometry import Point3D

from ...core.domain.exceptions import ElementNotFoundError
from ...core.domain.models.bond import BondType
from ...core.domain.models.periodic_table import get_element
from ...core.domain.models.molecule import Molecule

logger = logging.getLogger(__name__)

RDKIT_BOND_TYPES = MappingProxyType(
    {
        BondType.SINGLE: Chem.BondType.SINGLE,
        BondType.DOUBLE: Chem.BondType.DOUBLE,
        BondType.TRIPLE: Chem.BondType.TRIPLE,
        BondType.AROMATIC: Chem.BondType.AROMATIC,
        BondType.COORDINATE: Chem.BondType.DATIVE,
        BondType.WEAK: Chem.BondType.HYDROGEN,
    }
)


class RDKitAdapter:
    """Adapter for RDKit molecule functionality."""

    def to_mol(self, molecule: Molecule) -> Chem.Mol:
        """
        Convert a Molecule to an RDKit molecule with one 3-D conformer.

        The molecule is not sanitized. Partial charges are stored in the
        ``charge`` double property of each RDKit atom. Atoms whose symbol is
        not a known element become dummy atoms (atomic number 0).

        Args:
            molecule: Molecule to convert

        Returns:
            RDKit molecule with atoms in the same order
        """
        rw_mol = Chem.RWMol()
        conformer = Chem.Conformer(molecule.get_number_of_atoms())

        for index, atom in enumerate(molecule):
            rd_atom = self._make_atom(index, atom.symbol)
            rd_atom.SetDoubleProp("charge", atom.charge)
            if atom.remark:
                rd_atom.SetProp("remark", atom.remark)
            rw_mol.AddAtom(rd_atom)
            conformer.SetAtomPosition(
                index, Point3D(atom.center.x, atom.center.y, atom.center.z)
            )

        for bond in molecule.get_bonds():
            rw_mol.AddBond(
                bond.atom_1_idx, bond.atom_2_idx, RDKIT_BOND_TYPES[bond.bond_type]
            )
            if bond.bond_type is BondType.AROMATIC:
                rw_mol.GetBondBetweenAtoms(
                    bond.atom_1_idx, bond.atom_2_idx
                ).SetIsAromatic(True)
                rw_mol.GetAtomWithIdx(bond.atom_1_idx).SetIsAromatic(True)
                rw_mol.GetAtomWithIdx(bond.atom_2_idx).SetIsAromatic(True)

        rw_mol.AddConformer(conformer, assignId=True)
        if molecule.name:
            rw_mol.SetProp("_Name", molecule.name)

        logger.debug(
            "Converted %r to RDKit (%d atoms, %d bonds)",
            molecule.name,
            rw_mol.GetNumAtoms(),
            rw_mol.GetNumBonds(),
        )
        return rw_mol.GetMol()

    @staticmethod
    def _make_atom(index: int, symbol: str) -> Chem.Atom:
        try:
            return Chem.Atom(get_element(symbol).number)
        except ElementNotFoundError:
            logger.warning(
                "Atom %d has unknown element %r; using a dummy atom", index, symbol
            )
            return Chem.Atom(0)
