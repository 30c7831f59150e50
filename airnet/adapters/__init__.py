"""Adapters - Concrete implementations of the ports."""
