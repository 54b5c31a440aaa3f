"""YouTube analytics over the YouTube Data API v3"""

from .pipeline import AggregationPipeline
from .youtube_client import YouTubeAPIError, YouTubeClient

__all__ = ["AggregationPipeline", "YouTubeAPIError", "YouTubeClient"]
