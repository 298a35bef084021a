"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store backends so the wire
representation does not depend on how records are persisted.
"""
