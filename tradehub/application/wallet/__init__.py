"""
Application layer for the wallet bounded context.
"""
