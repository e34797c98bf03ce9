"""Core services: staging lifecycle, stream copies and path forms."""
