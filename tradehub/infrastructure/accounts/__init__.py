"""
Accounts adapters: SQL user store, bcrypt, JWT, profile data.
"""
