"""Shared Pydantic schema base with camelCase aliases."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every wire record: snake_case in Python, camelCase in JSON.

    Responses are serialized by alias, so `display_name` goes out as
    `displayName`; inputs are accepted under either name.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Liveness payload returned by /health."""
    status: str = "ok"
    app: str
    env: str
    version: str
