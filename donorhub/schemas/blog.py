from datetime import datetime
from enum import Enum

from pydantic import Field

from donorhub.schemas.common import ApiModel


class BlogStatusEnum(str, Enum):
    draft = "draft"
    published = "published"


class BlogBase(ApiModel):
    title: str = Field(..., min_length=1, max_length=200)
    thumbnail: str | None = None
    content: str = Field(..., min_length=1)
    created_by: str | None = None


class BlogCreate(BlogBase):
    pass


class BlogUpdate(BlogBase):
    """Full overwrite: omitted optional fields are cleared."""


class BlogResponse(BlogBase):
    id: str
    status: BlogStatusEnum
    created_at: datetime
    updated_at: datetime | None = None
