"""Adapter between Molecule and NetworkX graphs."""

from typing import Dict, Hashable
import logging
import networkx as nx

from ...core.domain.models.atom import Atom
from ...core.domain.models.bond import BondType
from ...core.domain.models.molecule import Molecule
from ...core.domain.models.point import Point

logger = logging.getLogger(__name__)


class NetworkXAdapter:
    """Converts molecules to and from NetworkX graphs.

    Nodes carry ``element``, ``coord``, ``charge`` and ``remark``; edges carry
    ``bond_type`` (the BondType name) and ``bond_order``.
    """

    def to_graph(self, molecule: Molecule) -> nx.Graph:
        """
        Convert a Molecule to an undirected graph.

        Args:
            molecule: Molecule to convert

        Returns:
            Graph whose nodes are atom positions in the molecule
        """
        graph = nx.Graph(name=molecule.name, remark=molecule.remark)

        for index, atom in enumerate(molecule):
            graph.add_node(
                index,
                element=atom.symbol,
                coord=(atom.center.x, atom.center.y, atom.center.z),
                charge=atom.charge,
                remark=atom.remark,
            )

        for bond in molecule.get_bonds():
            graph.add_edge(
                bond.atom_1_idx,
                bond.atom_2_idx,
                bond_type=bond.bond_type.name,
                bond_order=bond.bond_type.bond_order,
            )

        return graph

    def from_graph(self, graph: nx.Graph) -> Molecule:
        """
        Build a Molecule from a graph laid out as produced by to_graph.

        Atoms are added in node iteration order. Edges without a
        ``bond_type`` attribute become SINGLE bonds.

        Args:
            graph: Graph to convert

        Returns:
            New Molecule

        Raises:
            KeyError: If an edge names an unknown bond type
        """
        molecule = Molecule(
            name=graph.graph.get("name", ""), remark=graph.graph.get("remark", "")
        )
        positions: Dict[Hashable, int] = {}

        for position, (node, attrs) in enumerate(graph.nodes(data=True)):
            molecule.add_atom(
                Atom(
                    center=Point.from_array(attrs.get("coord", (0.0, 0.0, 0.0))),
                    charge=float(attrs.get("charge", 0.0)),
                    symbol=str(attrs.get("element", "")),
                    remark=str(attrs.get("remark", "")),
                )
            )
            positions[node] = position

        for node_1, node_2, attrs in graph.edges(data=True):
            if node_1 == node_2:
                logger.warning("Skipping self-loop on node %r", node_1)
                continue
            bond_type = BondType[str(attrs.get("bond_type", "SINGLE")).strip().upper()]
            molecule.add_bond(positions[node_1], positions[node_2], bond_type)

        return molecule
