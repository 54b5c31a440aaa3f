"""Tag lookup service"""

import logging

from .models import TagRequest, TagResponse

logger = logging.getLogger(__name__)

INVALID_TAG_MESSAGE = "Invalid tag name"

# Fixed per-tag count served until tags are backed by a real index
TAG_VIDEO_COUNT = 10


def lookup_tag(request: TagRequest) -> TagResponse:
    """
    Answer a tag lookup

    Returns:
        TagResponse with the tag name and its video count, or an error
        message and no tag name when the requested name is empty
    """
    if not request.tag_name:
        logger.warning("Rejected tag lookup with empty tag name")
        return TagResponse(tag_name=None, video_count=0, error_message=INVALID_TAG_MESSAGE)

    return TagResponse(tag_name=request.tag_name, video_count=TAG_VIDEO_COUNT)
