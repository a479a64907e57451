"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store's ``Seat`` dataclass to decouple
the API representation from persistence.
"""
