"""
Service layer.

The record stores encapsulate storage for every entity kind behind one
interface (``RecordStore``), so API handlers do not care whether
records live in memory or in a local SQLite file.
"""
