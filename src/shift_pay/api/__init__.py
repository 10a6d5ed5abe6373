"""HTTP API for the shift pay engine."""
