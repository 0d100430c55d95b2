"""
Top‑level package for the Service Marketplace API.

Makes ``marketplace_api`` importable so that modules within ``app``
can be referenced by fully qualified names such as
``marketplace_api.app.main``.  All functionality lives in the ``app``
subpackage.
"""

__all__ = []
