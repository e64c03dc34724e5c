"""Greedy offer/request matching for a ledger-based disaster relief protocol."""

__version__ = "0.1.0"
