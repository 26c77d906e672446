"""
Contracts (data models).

This folder defines the request/response shapes for external integrations:
- the supply request client interface and its transport error

Both mock and real HTTP clients should use these contracts.
"""
