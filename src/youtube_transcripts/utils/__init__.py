"""
Utility modules for transcript retrieval.
"""

from .logging import setup_logger, get_logger
from .youtube_utils import sanitize_video_id

__all__ = [
    'setup_logger',
    'get_logger',
    'sanitize_video_id',
]
