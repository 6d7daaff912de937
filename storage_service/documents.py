from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class JsonDocument(BaseModel):
    """
    Base for records persisted with save/load.

    Unknown fields are rejected on load. Subclasses that must tolerate them set
    model_config = ConfigDict(extra="ignore") (or "allow").
    """

    model_config = ConfigDict(extra="forbid")
