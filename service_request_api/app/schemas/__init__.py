"""
Pydantic schema definitions for API payloads.

Schemas are separated from the stored records (plain dictionaries) to
decouple the API representation from persistence.
"""
