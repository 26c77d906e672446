"""
Real HTTP integration clients.

These clients communicate with the real supply request backend.

Important:
- Must implement the same interfaces as the mock clients
- Must accept requests shaped according to src/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in src/api/dependencies.py only.
"""
