"""HTTP API for contributor statistics."""
