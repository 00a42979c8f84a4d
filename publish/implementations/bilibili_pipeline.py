"""
Bilibili Pipeline Placeholder

Bilibili publishing is not implemented. The pipeline exists so the
router's platform table is complete; every upload fails with the same
PlatformNotImplemented error. Callers should treat it as a permanent
capability gap, not a transient failure.
"""

import logging
from typing import Optional

from publish.constants import Platform
from publish.errors import PlatformNotImplemented
from publish.interfaces.pipeline_interface import UploadPipelineInterface
from publish.models.upload_request import UploadRequest
from publish.models.upload_result import UploadResult


class BilibiliPipeline(UploadPipelineInterface):
    """Placeholder pipeline that always fails"""

    platform = Platform.BILIBILI

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def upload(self, request: UploadRequest) -> UploadResult:
        """Always raises PlatformNotImplemented (media is not consumed)"""
        self.logger.warning(f"Bilibili upload requested ({request.request_id})")
        raise PlatformNotImplemented("Bilibili")

    def is_available(self) -> bool:
        return False
