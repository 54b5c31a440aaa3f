"""Map raw YouTube Data API fragments into result records

Pure functions only: no I/O and no further API calls. A fragment that lacks a
required field raises MappingError so the calling pipeline stage can fail as
a whole.
"""

from typing import Any, Optional

from pydantic import ValidationError

from .models import (
    HIDDEN_COUNT_PLACEHOLDER,
    NO_DESCRIPTION_PLACEHOLDER,
    NO_TAGS_PLACEHOLDER,
    ChannelProfile,
    RecentVideo,
    VideoDetail,
    VideoStats,
    VideoSummary,
)


class MappingError(ValueError):
    """Raised when a response fragment is missing required data"""


def _require(container: Any, key: str, context: str) -> Any:
    if not isinstance(container, dict) or container.get(key) is None:
        raise MappingError(f"{context}: missing '{key}'")
    return container[key]


def default_thumbnail_url(snippet: dict, context: str) -> str:
    """Resolve the smallest ('default') thumbnail of a snippet"""
    thumbnails = _require(snippet, "thumbnails", context)
    default = _require(thumbnails, "default", context)
    return _require(default, "url", context)


def join_tags(snippet: dict) -> str:
    """Comma-join snippet tags, or the placeholder when there are none"""
    tags = snippet.get("tags")
    if not tags:
        return NO_TAGS_PLACEHOLDER
    return ", ".join(tags)


def _count(statistics: dict, key: str) -> str:
    """Decimal string of a statistics counter, or the placeholder when hidden"""
    if statistics.get(key) is None:
        return HIDDEN_COUNT_PLACEHOLDER
    return str(int(statistics[key]))


def _build(model, context: str, **fields):
    try:
        return model(**fields)
    except ValidationError as e:
        raise MappingError(f"{context}: {e}") from e


def map_search_hit(item: dict) -> VideoSummary:
    """search().list hit -> VideoSummary"""
    snippet = _require(item, "snippet", "search hit")

    return _build(
        VideoSummary,
        "search hit",
        video_id=search_hit_video_id(item),
        title=_require(snippet, "title", "search hit"),
        description=snippet.get("description", ""),
        channel_title=snippet.get("channelTitle", ""),
        thumbnail_url=default_thumbnail_url(snippet, "search hit"),
    )


def search_hit_video_id(item: dict) -> str:
    """Extract the video ID of a search hit"""
    return _require(_require(item, "id", "search hit"), "videoId", "search hit id")


def search_hit_description(item: dict) -> str:
    """Description of a search hit, or the placeholder when absent"""
    snippet = item.get("snippet") if isinstance(item, dict) else None
    description = (snippet or {}).get("description")
    return description if description is not None else NO_DESCRIPTION_PLACEHOLDER


def map_video_detail(item: dict) -> VideoDetail:
    """videos().list item (snippet part) -> VideoDetail"""
    snippet = _require(item, "snippet", "video")

    return _build(
        VideoDetail,
        "video",
        video_id=_require(item, "id", "video"),
        title=_require(snippet, "title", "video"),
        description=snippet.get("description", ""),
        channel_title=snippet.get("channelTitle", ""),
        channel_id=snippet.get("channelId", ""),
        default_thumbnail=default_thumbnail_url(snippet, "video"),
        tags=join_tags(snippet),
    )


def map_video_stats(item: dict) -> Optional[VideoStats]:
    """videos().list item (snippet,statistics parts) -> VideoStats

    Returns None when the item carries no statistics object. Counters the owner
    hides are reported with the "hidden" placeholder.
    """
    snippet = _require(item, "snippet", "video")
    statistics = item.get("statistics")
    if not statistics:
        return None

    return _build(
        VideoStats,
        "video statistics",
        title=_require(snippet, "title", "video"),
        description=snippet.get("description", ""),
        likes=_count(statistics, "likeCount"),
        views=_count(statistics, "viewCount"),
        tags=join_tags(snippet),
    )


def map_channel(item: dict) -> Optional[ChannelProfile]:
    """channels().list item -> ChannelProfile without recent videos

    Returns None when snippet or statistics are absent.
    """
    snippet = item.get("snippet") if isinstance(item, dict) else None
    statistics = item.get("statistics") if isinstance(item, dict) else None
    if not snippet or not statistics:
        return None

    return _build(
        ChannelProfile,
        "channel",
        title=_require(snippet, "title", "channel"),
        description=snippet.get("description", ""),
        thumbnail=default_thumbnail_url(snippet, "channel"),
        subscriber_count=statistics.get("subscriberCount", HIDDEN_COUNT_PLACEHOLDER),
        video_count=statistics.get("videoCount", HIDDEN_COUNT_PLACEHOLDER),
    )


def uploads_playlist_id(item: dict) -> Optional[str]:
    """Uploads playlist reference of a channel item, if present"""
    content_details = item.get("contentDetails") or {}
    related = content_details.get("relatedPlaylists") or {}
    return related.get("uploads") or None


def map_playlist_item(item: dict) -> RecentVideo:
    """playlistItems().list item -> RecentVideo"""
    snippet = _require(item, "snippet", "playlist item")
    resource = _require(snippet, "resourceId", "playlist item")

    return _build(
        RecentVideo,
        "playlist item",
        video_id=_require(resource, "videoId", "playlist item"),
        title=_require(snippet, "title", "playlist item"),
        thumbnail_url=default_thumbnail_url(snippet, "playlist item"),
    )
