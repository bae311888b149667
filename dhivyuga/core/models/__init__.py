"""
API-facing data models.

Database entities live in ``dhivyuga.core.database.entities``; the request
and response contracts of the HTTP API live in :mod:`.io`.
"""
