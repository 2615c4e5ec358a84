"""
Trading bounded context: domain layer.

This module describes what the dashboard shows about trading:
- Automated bots and their performance
- Trading signals
- Copy-trading experts
- Market analysis, indices and asset holdings
- The portfolio snapshot on the dashboard

None of it executes trades. Every object is a transient view.
"""
