"""
Pydantic schema definitions for API payloads.

Each domain (tasks, users) defines its own Pydantic models for request
and response bodies.  Schemas double as the records passed between the
repositories and services.
"""
