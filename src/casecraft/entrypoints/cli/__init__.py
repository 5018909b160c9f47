"""Command-line interface for CASECRAFT."""
