"""Domain types for iowalk."""
