"""
Interfaces Package

Abstract interfaces for publishing implementations.
"""

from publish.interfaces.pipeline_interface import UploadPipelineInterface
from publish.interfaces.platform_api_interface import ApiResponse, PlatformApiInterface

__all__ = [
    "ApiResponse",
    "PlatformApiInterface",
    "UploadPipelineInterface",
]
