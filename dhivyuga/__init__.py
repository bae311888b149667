"""Dhivyuga.

Backend of a catalog of Hindu mantras: a thin REST layer over a relational
database.

Packages
--------

- ``dhivyuga.core``: logging, monitoring, the database layer (entities and
  repositories) and the API I/O models.
- ``dhivyuga.server``: the FastAPI application, its routers, request
  dependencies, middleware and exception handlers.
"""
