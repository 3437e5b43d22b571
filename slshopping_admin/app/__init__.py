"""
Application package for the admin console.

The console is organised by layer: ``core`` (configuration, logging,
storage, templating, errors), ``schemas`` (entity models),
``repositories`` (SQLite storage), ``services`` (catalog business
rules) and ``api`` (one router per entity family, aggregated in
``api/router.py``).
"""

from .main import app  # noqa: F401
