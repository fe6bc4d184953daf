"""
Application layer for the books bounded context.

Use cases coordinate the Book entity and the repository port to fulfill
catalogue operations. No framework or infrastructure imports allowed.
"""
