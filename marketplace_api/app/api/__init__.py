"""
API package containing the HTTP routes.

``router.py`` aggregates the domain‑specific routers defined in
``endpoints`` and is mounted by the application factory under the
configured prefix.
"""
