"""Adapters to external services and storage."""
