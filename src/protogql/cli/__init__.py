"""Command line interface for protogql."""
