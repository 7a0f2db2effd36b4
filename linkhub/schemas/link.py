"""Pydantic schemas for Link resources"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class LinkCreate(BaseModel):
    """Schema for creating a link."""

    title: str = Field(..., min_length=1, max_length=200, description="Link title")
    url: str = Field(..., min_length=1, max_length=2048, description="Destination URL")
    slug: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    icon_url: Optional[str] = Field(default=None, max_length=2048)
    is_active: bool = True
    scheduled_at: Optional[datetime] = Field(
        default=None, description="Publish time; requires link scheduling"
    )


class LinkRead(BaseModel):
    """Schema returned when reading a link."""

    id: UUID
    user_id: UUID
    title: str
    url: str
    slug: Optional[str] = None
    description: Optional[str] = None
    icon_url: Optional[str] = None
    is_active: bool
    is_scheduled: bool
    scheduled_at: Optional[datetime] = None
    position: int
    click_count: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
