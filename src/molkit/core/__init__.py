"""Core domain layer of the molecular structure model."""
