"""
Pydantic schema definitions for API payloads.

The same record shape is used for request bodies, response bodies and
rows read back from the store.
"""
