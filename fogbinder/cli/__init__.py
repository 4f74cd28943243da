"""Command-line interface for Fogbinder."""
