"""Shared domain building blocks (errors, events, ports)."""
