"""
Server-side services: request dependencies and auth security helpers.
"""
