"""Infrastructure layer: adapters to external libraries."""
