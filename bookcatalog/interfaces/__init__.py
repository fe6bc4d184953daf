"""
Interfaces layer package.

Contains FastAPI routers, the request validation contract and Pydantic
response schemas. No business logic belongs here.
Routes call use cases and return responses.
"""
