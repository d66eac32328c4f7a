"""Adapter for building molecules from Biopython structure atoms."""

from typing import Iterable
import logging
from Bio.PDB.Atom import Atom as PDBAtom

from ...core.domain.exceptions import ElementNotFoundError
from ...core.domain.models.atom import Atom
from ...core.domain.models.molecule import Molecule
from ...core.domain.models.point import Point

logger = logging.getLogger(__name__)


class BioPythonAdapter:
    """Adapter for Biopython PDB entities."""

    def from_atoms(
        self,
        atoms: Iterable[PDBAtom],
        name: str = "",
        remark: str = "",
        perceive_bonds: bool = False,
    ) -> Molecule:
        """
        Build a Molecule from Biopython atoms.

        Args:
            atoms: Bio.PDB atoms, e.g. ``structure.get_atoms()``
            name: Name of the new molecule
            remark: Remark of the new molecule
            perceive_bonds: Run covalent-radius bond perception afterwards;
                skipped with a warning if any atom has an unknown element

        Returns:
            Molecule with one atom per input atom, in input order
        """
        molecule = Molecule(name=name, remark=remark)

        for pdb_atom in atoms:
            element = (pdb_atom.element or "").strip()
            charge = getattr(pdb_atom, "pqr_charge", None)
            molecule.add_atom(
                Atom(
                    center=Point.from_array(pdb_atom.get_coord()),
                    charge=float(charge) if charge is not None else 0.0,
                    symbol=element.capitalize(),
                    remark=pdb_atom.get_name(),
                )
            )

        if perceive_bonds:
            try:
                molecule.compute_covalent_bonds()
            except ElementNotFoundError as e:
                logger.warning(
                    "Skipping bond perception for %r: %s", molecule.name, e
                )
        return molecule
