"""Favorite resource request/response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class FavoriteCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    address: str = Field(min_length=1, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=64)
    website: Optional[str] = Field(default=None, max_length=512)


class FavoriteUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=64)
    website: Optional[str] = Field(default=None, max_length=512)


class FavoriteCheck(BaseModel):
    name: str
    address: str


class FavoriteResponse(BaseModel):
    id: int
    name: str
    address: str
    phone_number: Optional[str]
    website: Optional[str]
