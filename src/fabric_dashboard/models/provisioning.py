"""Pydantic models for demo-account provisioning."""

from typing import Optional

from pydantic import BaseModel


class DemoUser(BaseModel):
    username: str
    full_name: str
    email: str
    user_type: str


class AccountResult(BaseModel):
    username: str
    success: bool
    error: Optional[str] = None
