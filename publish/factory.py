"""
Publish Factory

Factory pattern for assembling the platform router and its pipelines.
Follows the same pattern as storage/factory.py for consistency.
"""

import logging
from typing import Literal, Optional

from publish.constants import Platform
from publish.implementations.bilibili_pipeline import BilibiliPipeline
from publish.implementations.mock_platform_api import MockPlatformApi
from publish.implementations.youtube_data_api import YouTubeDataApi
from publish.implementations.youtube_pipeline import YouTubePipeline
from publish.interfaces.platform_api_interface import PlatformApiInterface
from publish.router import PlatformRouter
from storage.factory import create_object_store
from storage.interfaces.storage_interface import ObjectStoreInterface

# Type alias
PublishMode = Literal["auto", "youtube", "mock"]


class PipelineFactory:
    """
    Factory for platform API clients and the router.

    Usage:
        # Real YouTube client, local object store
        router = PipelineFactory.create_router()

        # Mock API for testing
        router = PipelineFactory.create_router(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_api(cls, mode: PublishMode = "auto") -> PlatformApiInterface:
        """
        Create a platform API client.

        Args:
            mode: "auto" (real, fall back to mock), "youtube" (force real),
                "mock" (force simulated)

        Raises:
            RuntimeError: If mode="youtube" but the client cannot be created
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Platform API (forced)")
            return MockPlatformApi()

        if mode == "youtube":
            try:
                api = YouTubeDataApi()
                cls._logger.info("Creating YouTube Data API client (forced)")
                return api
            except Exception as e:
                raise RuntimeError(
                    f"YouTube API client requested but not available: {e}"
                ) from e

        # mode == "auto" - try YouTube first, fall back to mock
        try:
            api = YouTubeDataApi()
            cls._logger.info("Creating YouTube Data API client (auto-detected)")
            return api
        except Exception as e:
            cls._logger.warning(
                f"YouTube API client not available ({e}), using Mock Platform API"
            )
            return MockPlatformApi()

    @classmethod
    def create_router(
        cls,
        mode: PublishMode = "auto",
        object_store: Optional[ObjectStoreInterface] = None,
        api: Optional[PlatformApiInterface] = None,
    ) -> PlatformRouter:
        """
        Create a router with every known platform registered.

        Args:
            mode: API client mode (ignored when api is given)
            object_store: Store for thumbnail paths (None = from mode)
            api: Platform API client to share across pipelines

        Returns:
            PlatformRouter
        """
        api = api or cls.create_api(mode)
        if object_store is None:
            object_store = create_object_store(force_mock=(mode == "mock"))

        return PlatformRouter(
            {
                Platform.YOUTUBE: YouTubePipeline(api, object_store=object_store),
                Platform.BILIBILI: BilibiliPipeline(),
            },
        )


# Convenience function for quick creation
def create_router(
    force_mock: bool = False,
    object_store: Optional[ObjectStoreInterface] = None,
) -> PlatformRouter:
    """
    Quick router creation with simple mock override.

    Example:
        router = create_router()
        router = create_router(force_mock=True)
    """
    mode = "mock" if force_mock else "auto"
    return PipelineFactory.create_router(mode=mode, object_store=object_store)
