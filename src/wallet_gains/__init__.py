"""Unrealized gains calculator for Solana wallet token holdings."""

__version__ = "0.1.0"
