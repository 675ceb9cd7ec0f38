"""HTTP play surface: FastAPI app, routes and schemas."""
