"""Console presentation for iowalk."""
