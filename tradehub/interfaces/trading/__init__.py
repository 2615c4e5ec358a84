"""
HTTP interface for the trading bounded context:
/api/bots, /api/signals, /api/copy-experts and /api/market.
"""
