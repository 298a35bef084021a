"""
Top-level package for the Intern Portal API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``intern_portal_api.app.main:app``.
"""

__all__ = []
