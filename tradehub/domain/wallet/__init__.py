"""
Wallet bounded context: domain layer.

Balances, deposits, withdrawals and the withdrawal policy.
"""
