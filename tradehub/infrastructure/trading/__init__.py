"""
Trading adapters: mock catalogs for bots, signals, experts and markets.
"""
