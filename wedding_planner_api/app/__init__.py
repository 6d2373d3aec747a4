"""
Application package initializer.

The package is organised into ``core`` (configuration, logging,
database helpers), ``schemas`` (pydantic models per entity kind),
``services`` (record stores and dashboard logic) and ``api`` (FastAPI
routers).  The ASGI application lives in ``main`` and is created by
``create_app``.
"""
