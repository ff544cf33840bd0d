"""HTTP request/response schemas (Pydantic)."""
