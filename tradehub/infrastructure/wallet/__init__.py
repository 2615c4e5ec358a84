"""
Wallet adapters.
"""
