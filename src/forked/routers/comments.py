"""API routes for recipe comments."""

from fastapi import APIRouter, Depends, HTTPException, status

from forked.dependencies import get_comment_service, get_current_user
from forked.documents import UserContext
from forked.errors import ForkedError, to_http_exception
from forked.logging_config import get_logger
from forked.schemas import (
    CommentCreatedResponse,
    CommentRequest,
    CommentResponse,
    MessageResponse,
)
from forked.services.comments import CommentService

logger = get_logger(__name__)

router = APIRouter(prefix="/forked/ricette", tags=["comments"])


@router.post(
    "/{recipe_name}/commenti",
    response_model=CommentCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    recipe_name: str,
    request: CommentRequest,
    user: UserContext = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
) -> CommentCreatedResponse:
    """Comment on a recipe identified by its name."""
    try:
        comment = await service.add_comment(recipe_name, request.testo, user)
        return CommentCreatedResponse.from_comment(comment)
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to add comment to {recipe_name!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add comment",
        )


@router.get("/{recipe_name}/commenti", response_model=list[CommentResponse])
async def list_comments(
    recipe_name: str,
    service: CommentService = Depends(get_comment_service),
) -> list[CommentResponse]:
    """List the comments of a recipe, newest first."""
    try:
        comments = await service.list_comments(recipe_name)
        return [CommentResponse.from_comment(comment) for comment in comments]
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to list comments of {recipe_name!r}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )


@router.delete("/{recipe_name}/commenti/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    recipe_name: str,
    comment_id: str,
    user: UserContext = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
) -> MessageResponse:
    """Delete one of the authenticated user's own comments."""
    try:
        await service.delete_comment(recipe_name, comment_id, user)
        return MessageResponse(message="Comment deleted")
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to delete comment {comment_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
