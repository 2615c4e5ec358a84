"""
HTTP interface for the wallet bounded context: /api/wallet.
"""
