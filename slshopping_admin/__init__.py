"""
Top-level package for the SL Shopping admin console.

All functionality lives in submodules under ``app``; the package itself
exports nothing so that importing it has no side effects.
"""

__all__ = []
