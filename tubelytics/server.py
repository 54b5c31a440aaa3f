"""TubeLytics MCP Server - FastMCP Implementation

Exposes the YouTube analytics pipeline as MCP tools.
Supports both stdio and Streamable HTTP transports.
"""

import json
import logging
import os
from typing import Any, Optional

from fastmcp import FastMCP

from .config import config
from .models import TagRequest
from .pipeline import AggregationPipeline
from .tags import lookup_tag as lookup_tag_service
from .text_stats import top_words
from .youtube_client import YouTubeClient

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Get configuration from environment
PORT = int(os.getenv("PORT", "8080"))
HOST = os.getenv("HOST", "0.0.0.0")

# Create FastMCP server
mcp = FastMCP(name=config.mcp_server_name)

# Global pipeline (initialized on first use)
pipeline: Optional[AggregationPipeline] = None


def initialize_clients() -> AggregationPipeline:
    """Initialize the YouTube client and pipeline (lazy initialization)"""
    global pipeline

    if pipeline is not None:
        return pipeline  # Already initialized

    # Validate configuration
    missing_keys = config.validate_keys()
    if missing_keys:
        logger.error(f"Missing required configuration: {', '.join(missing_keys)}")
        logger.error("Please set these in your .env file or environment variables")
        raise ValueError(f"Missing API keys: {missing_keys}")

    logger.info("Initializing TubeLytics MCP Server...")
    pipeline = AggregationPipeline(YouTubeClient(api_key=config.youtube_api_key))
    logger.info("YouTube client initialized successfully")
    return pipeline


def _error(message: str) -> str:
    return json.dumps({"error": message})


def _respond(payload: Any) -> str:
    return json.dumps(payload, indent=2)


async def search_videos(query: str) -> str:
    """Search YouTube videos by keyword.

    Returns up to 10 results with video ID, title, description,
    channel title and default thumbnail URL.

    Args:
        query: Search term

    Returns:
        JSON string with the search results
    """
    try:
        active = initialize_clients()
    except ValueError as e:
        return _error(str(e))

    logger.info(f"Searching videos for: {query}")
    videos = await active.search_videos(query)
    return _respond({"query": query, "count": len(videos), "videos": videos})


async def search_videos_with_detail(query: str) -> str:
    """Search YouTube videos and include channel ID and tags for each result.

    Args:
        query: Search term

    Returns:
        JSON string with the enriched search results
    """
    try:
        active = initialize_clients()
    except ValueError as e:
        return _error(str(e))

    logger.info(f"Searching videos with detail for: {query}")
    videos = await active.search_videos_with_detail(query)
    return _respond({"query": query, "count": len(videos), "videos": videos})


async def get_video_details(video_id: str) -> str:
    """Get title, description, likes, views and tags of a single video.

    Args:
        video_id: YouTube video ID

    Returns:
        JSON string with the video details ({} when not found)
    """
    try:
        active = initialize_clients()
    except ValueError as e:
        return _error(str(e))

    logger.info(f"Fetching video details for: {video_id}")
    details = await active.get_video_details(video_id)
    return _respond(details)


async def get_channel_profile(channel_id: str) -> str:
    """Get a channel profile with its 10 most recent uploads.

    Args:
        channel_id: YouTube channel ID

    Returns:
        JSON string with title, description, thumbnail, subscriber and
        video counts, and recent videos ({} when not found)
    """
    try:
        active = initialize_clients()
    except ValueError as e:
        return _error(str(e))

    logger.info(f"Fetching channel profile for: {channel_id}")
    profile = await active.fetch_channel_profile(channel_id)
    return _respond(profile)


async def get_word_stats(query: str, limit: Optional[int] = None) -> str:
    """Get word frequencies across the descriptions of up to 50 matching videos.

    Args:
        query: Search term
        limit: Number of most frequent words to return (default from config)

    Returns:
        JSON string mapping words to counts, most frequent first
    """
    try:
        active = initialize_clients()
    except ValueError as e:
        return _error(str(e))

    limit = limit if limit is not None else config.word_stats_limit
    if limit < 1:
        return _error("limit must be at least 1")

    logger.info(f"Computing word stats for: {query}")
    stats = await active.fetch_word_stats(query)
    return _respond(
        {
            "query": query,
            "distinctWords": len(stats),
            "words": top_words(stats, limit),
        }
    )


def lookup_tag(tag_name: str) -> str:
    """Look up how many videos carry a tag.

    Args:
        tag_name: Tag to look up

    Returns:
        JSON string with tagName, videoCount and errorMessage
    """
    response = lookup_tag_service(TagRequest(tag_name=tag_name))
    return _respond(
        {
            "tagName": response.tag_name,
            "videoCount": response.video_count,
            "errorMessage": response.error_message,
        }
    )


# Registered without decorating so the handlers stay plain callables
for _tool in (
    search_videos,
    search_videos_with_detail,
    get_video_details,
    get_channel_profile,
    get_word_stats,
    lookup_tag,
):
    mcp.tool()(_tool)


# Startup message
logger.info("TubeLytics MCP Server initialized")
logger.info(f"Server name: {config.mcp_server_name}")
