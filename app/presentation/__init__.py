"""Presentation layer: FastAPI routers, schemas, dependencies and middleware."""
