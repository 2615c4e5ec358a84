"""
Application layer for the trading bounded context.

Use cases read mock catalogs through domain ports and acknowledge
bot, signal and copy-trading actions. Nothing is persisted.
"""
