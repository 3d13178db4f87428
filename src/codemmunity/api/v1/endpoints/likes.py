"""Like counter endpoint."""

import logging

from fastapi import APIRouter, Query, status
from fastapi.responses import PlainTextResponse

from codemmunity.api.v1.dependencies import PostRepoDep
from codemmunity.schemas.like import LikeMode
from codemmunity.schemas.post import POST_ID_MAX
from codemmunity.services.like_service import adjust_likes

router = APIRouter(prefix="/likes", tags=["likes"])

logger = logging.getLogger(__name__)


@router.patch("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def modify_likes(
    posts: PostRepoDep,
    post_id: int = Query(..., ge=0, le=POST_ID_MAX, description="Post whose counter changes"),
    mode: LikeMode = Query(..., description="Increment or Decrement"),
) -> str:
    """Add or remove one like on a post."""
    logger.info("PATCH /api/likes")
    return adjust_likes(posts, post_id, mode)
