"""Adapters to third-party chemistry libraries."""

from .networkx_adapter import NetworkXAdapter
from .rdkit_adapter import RDKitAdapter
from .biopython_adapter import BioPythonAdapter

__all__ = [
    "NetworkXAdapter",
    "RDKitAdapter",
    "BioPythonAdapter",
]
