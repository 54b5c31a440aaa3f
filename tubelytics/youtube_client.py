"""YouTube Data API v3 client"""

import logging
import threading
from collections.abc import Sequence
from typing import Any, Optional, Union

from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiError
from googleapiclient.http import build_http
from httplib2 import HttpLib2Error

from .config import config

logger = logging.getLogger(__name__)

SEARCH_PART = "snippet"
VIDEO_DETAIL_PART = "snippet"
VIDEO_STATS_PART = "snippet,statistics"
CHANNEL_PART = "snippet,statistics,contentDetails"
PLAYLIST_ITEM_PART = "snippet"


class YouTubeAPIError(Exception):
    """Raised when a YouTube Data API request cannot produce a response"""


class YouTubeClient:
    """Client for YouTube Data API v3

    Thin read-only wrapper: every method issues exactly one request and
    returns the raw response dict. Any failure is raised as YouTubeAPIError.
    """

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key if api_key is not None else config.youtube_api_key
        self._youtube = None
        self._build_lock = threading.Lock()

    def _get_service(self):
        """Lazy-load the YouTube API resource"""
        with self._build_lock:
            if self._youtube is None:
                if not self.api_key:
                    raise YouTubeAPIError("YouTube API key is required")
                self._youtube = build("youtube", "v3", developerKey=self.api_key)
        return self._youtube

    def search(self, query: str, max_results: int, kind: str = "video") -> dict[str, Any]:
        """
        Search by keyword

        Args:
            query: Search term
            max_results: Page size (single page only)
            kind: Resource type to search for

        Returns:
            Raw search list response
        """
        return self._execute(
            "search",
            lambda youtube: youtube.search().list(
                part=SEARCH_PART, q=query, type=kind, maxResults=max_results
            ),
        )

    def videos(
        self, video_ids: Union[str, Sequence[str]], part: str = VIDEO_DETAIL_PART
    ) -> dict[str, Any]:
        """
        Fetch videos by ID in one batched request

        Args:
            video_ids: Video IDs, either a sequence or an already comma-joined string
            part: Comma-separated resource parts to include

        Returns:
            Raw video list response
        """
        if not isinstance(video_ids, str):
            video_ids = ",".join(video_ids)

        return self._execute(
            "videos",
            lambda youtube: youtube.videos().list(part=part, id=video_ids),
        )

    def channels(self, channel_id: str, part: str = CHANNEL_PART) -> dict[str, Any]:
        """Fetch a channel by ID"""
        return self._execute(
            "channels",
            lambda youtube: youtube.channels().list(part=part, id=channel_id),
        )

    def playlist_items(self, playlist_id: str, max_results: int) -> dict[str, Any]:
        """Fetch the first page of a playlist"""
        return self._execute(
            "playlistItems",
            lambda youtube: youtube.playlistItems().list(
                part=PLAYLIST_ITEM_PART, playlistId=playlist_id, maxResults=max_results
            ),
        )

    def _execute(self, operation: str, make_request) -> dict[str, Any]:
        """Build and execute one request, mapping every failure to YouTubeAPIError"""
        youtube = self._get_service()

        try:
            # httplib2.Http is not thread-safe; requests run in executor threads
            response = make_request(youtube).execute(http=build_http())
        except (GoogleApiError, HttpLib2Error, OSError) as e:
            raise YouTubeAPIError(f"{operation} request failed: {e}") from e

        if not isinstance(response, dict):
            raise YouTubeAPIError(
                f"{operation} returned a malformed response: {type(response).__name__}"
            )

        logger.debug(f"{operation} returned {len(response.get('items') or [])} items")
        return response
