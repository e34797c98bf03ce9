"""Infrastructure adapters for iowalk."""
