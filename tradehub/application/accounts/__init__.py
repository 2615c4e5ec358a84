"""
Application layer for the accounts bounded context.

Sign-up, sign-in, bearer-token authentication, dashboard and profile.
"""
