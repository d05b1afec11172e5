"""HTTP layer: FastAPI routes and their dependencies."""
