import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from folio import dependencies as deps
from folio.exceptions import PostNotFoundError
from folio.schemas.blog import PostRecord, PostSummary
from folio.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    limit: Optional[int] = Query(None, ge=1),
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get published posts metadata, newest first."""
    try:
        posts = service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
    return posts[:limit] if limit else posts


@router.get("/posts/{slug}", response_model=PostRecord)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, with its content rendered to HTML."""
    try:
        return service.get_rendered_post(slug)
    except PostNotFoundError:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
