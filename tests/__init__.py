# tests/__init__.py
"""
Test Suite for Program Hub.

Organization:
- `core`: Selectors and Use Cases over an in-memory record store.
- `adapters`: Storage backends, the session provider and the CLI.
"""
