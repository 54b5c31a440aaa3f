"""Shared fixtures for the TubeLytics test suite.

No test touches the network: the YouTube client is replaced either by
:class:`FakeYouTubeClient` or by a mocked googleapiclient resource.
"""

from __future__ import annotations

from typing import Any

import pytest
from factories import FakeYouTubeClient

from tubelytics.pipeline import AggregationPipeline
from tubelytics.youtube_client import YouTubeAPIError


@pytest.fixture
def api_error() -> YouTubeAPIError:
    return YouTubeAPIError("quotaExceeded")


@pytest.fixture
def make_pipeline():
    """Build a pipeline around a FakeYouTubeClient configured per test."""

    def _make(**responses: Any) -> tuple[AggregationPipeline, FakeYouTubeClient]:
        client = FakeYouTubeClient(**responses)
        return AggregationPipeline(client), client

    return _make
