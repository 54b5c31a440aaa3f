"""Asynchronous aggregation pipeline over the YouTube Data API

Every public operation is a coroutine that resolves to a well-formed result:
a failing stage degrades to an empty list or mapping instead of raising. The
distinction between "no data" and "upstream failure" is kept internally in a
StageOutcome and logged, but never surfaces to callers.
"""

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from . import mapper
from .models import RecentVideo
from .text_stats import word_frequency
from .youtube_client import VIDEO_STATS_PART, YouTubeClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEARCH_PAGE_SIZE = 10
DESCRIPTION_SAMPLE_SIZE = 50
RECENT_VIDEOS_LIMIT = 10


class StageStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class StageOutcome(Generic[T]):
    """Result of one pipeline stage"""

    stage: str
    status: StageStatus
    value: T
    reason: Optional[str] = None


class AggregationPipeline:
    """Sequences dependent YouTube API calls and merges their results"""

    def __init__(self, client: YouTubeClient):
        self.client = client

    # Public operations

    async def search_videos(self, query: str) -> list[dict[str, str]]:
        """
        Search videos by keyword

        Returns:
            Up to 10 VideoSummary mappings, or [] on any failure
        """

        async def work():
            response = await self._call(self.client.search, query, SEARCH_PAGE_SIZE)
            hits = self._items(response)[:SEARCH_PAGE_SIZE]
            return [mapper.map_search_hit(hit).to_dict() for hit in hits]

        outcome = await self._run_stage(f"search_videos[{query}]", work, [])
        return outcome.value

    async def search_videos_with_detail(self, query: str) -> list[dict[str, str]]:
        """
        Search videos and enrich them with one batched detail lookup

        The detail stage issues exactly one videos request for all IDs of the
        search page. A failure in either stage yields [].
        """

        async def work():
            response = await self._call(self.client.search, query, SEARCH_PAGE_SIZE)
            hits = self._items(response)[:SEARCH_PAGE_SIZE]
            video_ids = [mapper.search_hit_video_id(hit) for hit in hits]
            if not video_ids:
                return []

            details = await self._call(self.client.videos, video_ids)
            return [mapper.map_video_detail(item).to_dict() for item in self._items(details)]

        outcome = await self._run_stage(f"search_videos_with_detail[{query}]", work, [])
        return outcome.value

    async def get_video_details(self, video_id: str) -> dict[str, str]:
        """
        Look up title, description, likes, views and tags of one video

        Returns:
            VideoStats mapping, or {} when the video is unknown, has no
            statistics, or the request fails
        """

        async def work():
            response = await self._call(self.client.videos, video_id, VIDEO_STATS_PART)
            items = self._items(response)
            if not items:
                return {}
            stats = mapper.map_video_stats(items[0])
            return stats.to_dict() if stats is not None else {}

        outcome = await self._run_stage(f"get_video_details[{video_id}]", work, {})
        return outcome.value

    async def fetch_channel_profile(self, channel_id: str) -> dict[str, Any]:
        """
        Fetch a channel profile together with its recent uploads

        recentVideos is always present once the channel itself was found; a
        missing uploads playlist or a failing playlist lookup leaves it empty
        without failing the profile.
        """

        async def work():
            response = await self._call(self.client.channels, channel_id)
            items = self._items(response)
            if not items:
                return {}

            channel = items[0]
            profile = mapper.map_channel(channel)
            if profile is None:
                return {}

            recent_videos = []
            playlist_id = mapper.uploads_playlist_id(channel)
            if playlist_id:
                recent = await self._run_stage(
                    f"recent_videos[{playlist_id}]",
                    lambda: self.fetch_recent_videos(playlist_id),
                    [],
                )
                recent_videos = recent.value

            return profile.model_copy(update={"recent_videos": recent_videos}).to_dict()

        outcome = await self._run_stage(f"fetch_channel_profile[{channel_id}]", work, {})
        return outcome.value

    async def fetch_recent_videos(self, playlist_id: str) -> list[RecentVideo]:
        """
        Fetch up to 10 items of an uploads playlist as RecentVideo records

        Raises on failure; callers decide how to degrade.
        """
        response = await self._call(
            self.client.playlist_items, playlist_id, RECENT_VIDEOS_LIMIT
        )
        items = self._items(response)[:RECENT_VIDEOS_LIMIT]
        return [mapper.map_playlist_item(item) for item in items]

    async def fetch_descriptions_by_query(self, query: str) -> list[str]:
        """Descriptions of up to 50 search hits, or [] on failure"""

        async def work():
            response = await self._call(
                self.client.search, query, DESCRIPTION_SAMPLE_SIZE
            )
            hits = self._items(response)[:DESCRIPTION_SAMPLE_SIZE]
            return [mapper.search_hit_description(hit) for hit in hits]

        outcome = await self._run_stage(f"fetch_descriptions[{query}]", work, [])
        return outcome.value

    async def fetch_word_stats(self, query: str) -> dict[str, int]:
        """
        Word frequencies over the descriptions matching a query

        Runs strictly after the description fetch has completed.
        """
        descriptions = await self.fetch_descriptions_by_query(query)
        stats = word_frequency(descriptions)
        logger.info(
            f"Word stats for '{query}': {len(stats)} distinct words "
            f"from {len(descriptions)} descriptions"
        )
        return stats

    # Internals

    async def _call(self, method: Callable[..., T], *args: Any) -> T:
        """Run a blocking client call in the default executor"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(method, *args))

    @staticmethod
    def _items(response: Any) -> list:
        if not isinstance(response, dict):
            raise mapper.MappingError("response is not an object")
        items = response.get("items") or []
        if not isinstance(items, list):
            raise mapper.MappingError("response items is not a list")
        return items

    async def _run_stage(
        self, stage: str, work: Callable[[], Awaitable[T]], empty: T
    ) -> StageOutcome[T]:
        """Run one stage, collapsing any failure into `empty`"""
        try:
            value = await work()
        except Exception as e:
            logger.error(f"Stage {stage} failed: {e}", exc_info=True)
            return StageOutcome(stage, StageStatus.FAILED, empty, reason=str(e))

        if not value:
            logger.debug(f"Stage {stage} returned no data")
            return StageOutcome(stage, StageStatus.EMPTY, empty)

        return StageOutcome(stage, StageStatus.OK, value)
