from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PostRecord(BaseModel):
    """One entry of the lunr search store."""
    model_config = ConfigDict(extra="forbid")

    title: str
    excerpt: str
    categories: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    url: str
    teaser: Optional[str] = None  # image url, null when the post has none
