"""Pydantic schemas for list rows and detail views backed by the Admin GraphQL API."""

from datetime import datetime
from pydantic import BaseModel


class ProductRow(BaseModel):
    """Single product row for the products index table."""

    id: str
    title: str
    status: str  # lower-cased API status, e.g. "active", "draft"
    status_tone: str  # "success" for active, "critical" otherwise
    total_inventory: int | None = None
    price_amount: str | None = None  # decimal string as returned by the API
    currency_code: str | None = None
    thumbnail_url: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ArticleRow(BaseModel):
    """Blog article row."""

    id: str
    title: str
    handle: str | None = None
    blog_title: str | None = None
    image_url: str | None = None
    published_at: datetime | None = None  # None for unpublished drafts


class PageRow(BaseModel):
    """Online store page row."""

    id: str
    title: str
    handle: str | None = None
    summary: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PageDetail(BaseModel):
    id: str
    title: str
    handle: str | None = None
    body: str = ""
    body_summary: str = ""
    preview_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
