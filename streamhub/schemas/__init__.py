# streamhub/schemas/__init__.py
"""
The `schemas` package defines the Pydantic models used across streamhub:
service identity, backend runtime state, the typed per-backend preference
schema and the environment settings.
"""
