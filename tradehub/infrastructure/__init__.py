"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the SQL user store, password hashing,
JWT signing, and the mock catalogs behind the dashboard.
"""
