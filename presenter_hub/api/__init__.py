"""HTTP API for the generation proxy."""
