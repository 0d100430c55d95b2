"""
Core infrastructure: settings, logging, errors and the in‑memory store.
"""
