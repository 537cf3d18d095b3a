"""
Ledger service: accounts and peer-to-peer money transfers.
"""

__version__ = "1.0.0"
