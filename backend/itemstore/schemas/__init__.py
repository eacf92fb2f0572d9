"""API Schemas — Pydantic models for the HTTP shell boundary."""
