"""
Pydantic schema definitions for contact payloads.

Schemas are separated from the database layer to decouple the API
representation from persistence.
"""
