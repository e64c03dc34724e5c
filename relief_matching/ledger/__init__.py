"""Ledger read collaborators for the matching engine."""

from .base import LedgerError, LedgerReader, OwnedResources
from .sui_client import SuiLedgerReader

__all__ = ["LedgerError", "LedgerReader", "OwnedResources", "SuiLedgerReader"]
