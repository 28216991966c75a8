"""Console output adapters."""
