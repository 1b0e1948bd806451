"""Comments attached to recipes by name."""

from forked.documents import Comment, UserContext, parse_document_id
from forked.errors import InvalidArgument, NotFound
from forked.logging_config import get_logger
from forked.store.base import DocumentStore

logger = get_logger(__name__)


class CommentService:
    """Comment use cases over an injected document store."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def add_comment(self, recipe_name: str, text: str | None, user: UserContext) -> Comment:
        if not text or not text.strip():
            raise InvalidArgument("Comment text cannot be empty")

        if await self.store.find_recipe_by_name(recipe_name) is None:
            raise NotFound("Recipe not found")

        comment = Comment(
            recipe_name=recipe_name,
            user_id=user.id,
            user_name=user.name,
            text=text,
        )
        comment.id = await self.store.insert_comment(comment)

        logger.info(f"User {user.id} commented on {recipe_name!r}")
        return comment

    async def list_comments(self, recipe_name: str) -> list[Comment]:
        return await self.store.list_comments_for_recipe(recipe_name)

    async def delete_comment(self, recipe_name: str, comment_id: str, user: UserContext) -> None:
        """Delete a comment; only its author may do so."""
        comment_id = parse_document_id(comment_id)

        deleted = await self.store.delete_comment(comment_id, recipe_name, user.id)
        if deleted == 0:
            raise NotFound("Comment not found or not authorized")

        logger.info(f"User {user.id} deleted comment {comment_id}")
