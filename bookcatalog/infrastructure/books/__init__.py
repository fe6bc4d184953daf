"""
Infrastructure adapters for the books bounded context.

Each adapter implements a domain port (ABC) on top of the shared
Database accessor.
"""
