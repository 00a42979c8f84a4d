"""
Implementations Package

Concrete pipelines and platform API clients.
"""

from publish.implementations.bilibili_pipeline import BilibiliPipeline
from publish.implementations.mock_platform_api import MockPlatformApi
from publish.implementations.youtube_data_api import YouTubeDataApi
from publish.implementations.youtube_pipeline import YouTubePipeline

__all__ = [
    "BilibiliPipeline",
    "MockPlatformApi",
    "YouTubeDataApi",
    "YouTubePipeline",
]
