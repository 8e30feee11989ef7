"""Logging, configuration and log-context helpers."""
