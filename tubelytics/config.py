"""Configuration management"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration"""

    # API Keys
    youtube_api_key: str = Field(default_factory=lambda: os.getenv("YOUTUBE_API_KEY", ""))

    # MCP Server Configuration
    mcp_server_name: str = Field(
        default_factory=lambda: os.getenv("MCP_SERVER_NAME", "tubelytics")
    )

    # Logging
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Word statistics shown per tool call
    word_stats_limit: int = Field(
        default_factory=lambda: int(os.getenv("WORD_STATS_LIMIT", "50")), ge=1
    )

    def validate_keys(self) -> list[str]:
        """Validate required API keys and return list of missing keys"""
        missing = []
        if not self.youtube_api_key:
            missing.append("YOUTUBE_API_KEY")
        return missing


# Global config instance
config = Config()
