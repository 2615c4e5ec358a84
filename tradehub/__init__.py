"""
TradeHub: backend for the TradeHub trading dashboard.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - accounts: Users, sign-up/sign-in, JWT bearer authentication.
    - wallet: Bitcoin wallet, deposits, withdrawals and withdrawal rules.
    - trading: Bots, signals, copy-trading experts and market data.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (DB, hashing, tokens, mock catalogs).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
