"""Command line interface for skyframe."""
