"""Core interfaces.

Structural contracts (Protocol) implemented by the adapters:
- `Provider`: the transport that talks to a naming-service indexer.
- `NamingService`: the query surface shared by every naming backend.
"""
