"""
Service layer.

Each service encapsulates the rules for one part of the portal.  The
status service receives its record store from the caller, so the same
logic runs against MongoDB, SQLite or the in-memory store.
"""
