"""justact - append-only ledger for justified enactment."""

__version__ = "0.1.0"
