"""Command-line interface for normtmp."""
