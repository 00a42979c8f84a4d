"""
Platform Router

Dispatches an upload request to the pipeline registered for its platform.

The platform table is an explicit Platform -> pipeline mapping; adding a
platform means adding a Platform member and a pipeline, never a branch here.
"""

import logging
from typing import Any, Dict, Optional

from publish.constants import Platform
from publish.errors import UnsupportedPlatform
from publish.interfaces.pipeline_interface import UploadPipelineInterface
from publish.models.upload_request import UploadRequest
from publish.models.upload_result import UploadResult


def resolve_platform(name: Any) -> Platform:
    """
    Map a caller-supplied platform name to a Platform.

    Matching is case-insensitive and ignores surrounding whitespace.

    Raises:
        UnsupportedPlatform: Name is not a string or matches no platform
    """
    if isinstance(name, Platform):
        return name
    if not isinstance(name, str):
        raise UnsupportedPlatform(name)

    try:
        return Platform(name.strip().lower())
    except ValueError:
        raise UnsupportedPlatform(name) from None


class PlatformRouter:
    """
    Routes requests to platform pipelines.

    Usage:
        router = PlatformRouter({
            Platform.YOUTUBE: YouTubePipeline(api, store),
            Platform.BILIBILI: BilibiliPipeline(),
        })
        result = router.upload(request)
    """

    def __init__(
        self,
        pipelines: Dict[Platform, UploadPipelineInterface],
        logger: Optional[logging.Logger] = None,
    ):
        self.pipelines = dict(pipelines)
        self.logger = logger or logging.getLogger(__name__)

    def pipeline_for(self, name: Any) -> UploadPipelineInterface:
        """
        Look up the pipeline for a platform name.

        Raises:
            UnsupportedPlatform: Unknown name or no pipeline registered
        """
        platform = resolve_platform(name)
        pipeline = self.pipelines.get(platform)
        if pipeline is None:
            raise UnsupportedPlatform(name)
        return pipeline

    def upload(self, request: UploadRequest) -> UploadResult:
        """
        Publish a request through its platform's pipeline.

        The platform is resolved before the pipeline touches the media or
        the network.
        """
        pipeline = self.pipeline_for(request.platform)
        self.logger.info(
            f"Routing request {request.request_id} to {pipeline.platform.value}",
        )
        return pipeline.upload(request)

    def get_status(self) -> Dict[str, bool]:
        """Availability of each registered pipeline"""
        return {
            platform.value: pipeline.is_available()
            for platform, pipeline in self.pipelines.items()
        }
