"""
Accounts bounded context: domain layer.

Users, credentials and bearer-token claims.
"""
