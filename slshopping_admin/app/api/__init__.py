"""
HTTP layer of the console.

``router.py`` aggregates the per-family routers from ``endpoints``;
``deps.py`` provides the services they depend on.
"""
