"""
HTTP interface for the accounts bounded context: /api/auth and /api/user.
"""
