# cartly/api/__init__.py
from cartly.api.routers import carts, catalog, health, session

__all__ = ["carts", "catalog", "health", "session"]
