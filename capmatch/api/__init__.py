"""HTTP API for the Capital Match service."""
