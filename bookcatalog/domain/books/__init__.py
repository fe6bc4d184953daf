"""
Books bounded context: domain layer.

This module contains the domain model of the catalogue:
- The Book entity and its mutable fields
- The error taxonomy mapped to HTTP at the interface layer
- The repository port implemented by infrastructure
"""
