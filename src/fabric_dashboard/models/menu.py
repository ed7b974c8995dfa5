"""Pydantic models for the navigation menu."""

from pydantic import BaseModel, ConfigDict


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    icon: str  # lucide icon name rendered by the frontend
    path: str
