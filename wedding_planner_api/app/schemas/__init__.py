"""
Pydantic schema definitions for API payloads.

Each entity kind (guests, budget, venues, etc.) defines its own
``<Entity>Create``, ``<Entity>Update`` and ``<Entity>Read`` models.
The create models carry the defaults that are filled in when a record
is inserted; the update models describe partial changes.
"""
