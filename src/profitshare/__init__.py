"""Profit sharing ledger: monthly balances split between stakeholders."""

__version__ = "0.1.0"


def __getattr__(name):
    # CLI entry point is loaded on first access so domain imports stay light
    if name == "main":
        from profitshare.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
