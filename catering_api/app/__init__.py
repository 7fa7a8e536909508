"""
Application package.

The API is organised by layer: ``schemas`` holds the pydantic models,
``core`` the configuration, logging, error handling and the in-memory
store, ``services`` the business logic and ``api`` the FastAPI routers.
``main.create_app`` wires them together.
"""
