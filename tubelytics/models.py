"""Data models for YouTube analytics results"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NO_TAGS_PLACEHOLDER = "No tags available"
NO_DESCRIPTION_PLACEHOLDER = "No description available"
HIDDEN_COUNT_PLACEHOLDER = "hidden"


class ResultRecord(BaseModel):
    """Immutable record rendered as a flat camelCase mapping"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the field-value mapping handed to callers"""
        return self.model_dump(by_alias=True, exclude_none=True)


class VideoSummary(ResultRecord):
    """A single search hit"""

    video_id: str
    title: str
    description: str
    channel_title: str
    thumbnail_url: str


class VideoDetail(ResultRecord):
    """Search hit enriched by the batched video lookup"""

    video_id: str
    title: str
    description: str
    channel_title: str
    channel_id: str
    default_thumbnail: str
    tags: str = NO_TAGS_PLACEHOLDER


class VideoStats(ResultRecord):
    """Single-video lookup with statistics"""

    title: str
    description: str
    likes: str
    views: str
    tags: str = NO_TAGS_PLACEHOLDER


class RecentVideo(ResultRecord):
    """Entry of a channel's uploads playlist"""

    video_id: str
    title: str
    thumbnail_url: str


class ChannelProfile(ResultRecord):
    """YouTube channel profile with its most recent uploads"""

    title: str
    description: str
    thumbnail: str

    # Statistics, passed through as returned by the API
    subscriber_count: Union[int, str]
    video_count: Union[int, str]

    recent_videos: list[RecentVideo] = Field(default_factory=list, max_length=10)


class TagRequest(BaseModel):
    """Request for information about a tag"""

    tag_name: Optional[str] = None


class TagResponse(BaseModel):
    """Tag lookup answer; error_message is set only for invalid requests"""

    tag_name: Optional[str] = None
    video_count: int = Field(default=0, ge=0)
    error_message: Optional[str] = None
