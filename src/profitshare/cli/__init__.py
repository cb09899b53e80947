"""Command-line interface for profitshare."""
