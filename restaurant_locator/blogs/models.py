from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BlogPost(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    restaurant_id: str = Field(..., alias="restaurantId")
    restaurant_name: str = Field(..., alias="restaurantName")
    title: str
    content: str
    author: str
    publish_date: str = Field(..., alias="publishDate")
    tags: list[str] = Field(default_factory=list)
    image_url: str | None = Field(default=None, alias="imageUrl")


class BlogListResponse(BaseModel):
    blogs: list[BlogPost]


class BlogResponse(BaseModel):
    blog: BlogPost
