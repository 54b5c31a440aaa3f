"""Tests for the MCP tool handlers (tubelytics/server.py)."""

from __future__ import annotations

import json

import pytest
from factories import FakeYouTubeClient, channel_item, search_hit, video_item

from tubelytics import server
from tubelytics.pipeline import AggregationPipeline


@pytest.fixture
def fake_client(monkeypatch) -> FakeYouTubeClient:
    client = FakeYouTubeClient(
        search={
            "items": [
                search_hit("vid00000001", "Cats and Dogs!"),
                search_hit("vid00000002", "cats CATS dogs"),
            ]
        },
        videos={
            "items": [
                video_item("vid00000001", statistics={"likeCount": "1", "viewCount": "2"}),
                video_item("vid00000002"),
            ]
        },
        channels={"items": [channel_item(uploads=None)]},
    )
    monkeypatch.setattr(server, "pipeline", AggregationPipeline(client))
    return client


class TestTools:
    @pytest.mark.asyncio
    async def test_search_videos(self, fake_client):
        payload = json.loads(await server.search_videos("pets"))

        assert payload["query"] == "pets"
        assert payload["count"] == 2
        assert payload["videos"][0]["videoId"] == "vid00000001"

    @pytest.mark.asyncio
    async def test_search_videos_with_detail(self, fake_client):
        payload = json.loads(await server.search_videos_with_detail("pets"))

        assert payload["count"] == 2
        assert fake_client.calls["videos"] == 1

    @pytest.mark.asyncio
    async def test_get_video_details(self, fake_client):
        payload = json.loads(await server.get_video_details("vid00000001"))

        assert payload["likes"] == "1"
        assert payload["views"] == "2"

    @pytest.mark.asyncio
    async def test_get_channel_profile(self, fake_client):
        payload = json.loads(await server.get_channel_profile("UC1234567890123456789012"))

        assert payload["title"] == "Some Channel"
        assert payload["recentVideos"] == []

    @pytest.mark.asyncio
    async def test_get_word_stats_limit(self, fake_client):
        payload = json.loads(await server.get_word_stats("pets", limit=2))

        assert payload["distinctWords"] == 3
        assert list(payload["words"].items()) == [("cats", 3), ("dogs", 2)]

    @pytest.mark.asyncio
    async def test_get_word_stats_rejects_bad_limit(self, fake_client):
        payload = json.loads(await server.get_word_stats("pets", limit=0))

        assert payload == {"error": "limit must be at least 1"}

    def test_lookup_tag(self):
        assert json.loads(server.lookup_tag("python")) == {
            "tagName": "python",
            "videoCount": 10,
            "errorMessage": None,
        }

    def test_lookup_tag_invalid(self):
        payload = json.loads(server.lookup_tag(""))

        assert payload["tagName"] is None
        assert payload["errorMessage"] == "Invalid tag name"


class TestInitialization:
    @pytest.mark.asyncio
    async def test_missing_api_key_reported_as_error(self, monkeypatch):
        monkeypatch.setattr(server, "pipeline", None)
        monkeypatch.setattr(server.config, "youtube_api_key", "")

        payload = json.loads(await server.search_videos("pets"))

        assert "YOUTUBE_API_KEY" in payload["error"]
        assert server.pipeline is None

    def test_initialize_builds_pipeline_once(self, monkeypatch):
        monkeypatch.setattr(server, "pipeline", None)
        monkeypatch.setattr(server.config, "youtube_api_key", "test-key")

        first = server.initialize_clients()
        second = server.initialize_clients()

        assert first is second
        assert first.client.api_key == "test-key"
