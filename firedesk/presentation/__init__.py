"""Presentation layer - FastAPI routers and HTTP concerns.

Thin layer: resolves the acting identity, checks the access policy and
translates Results to HTTP responses.
"""
