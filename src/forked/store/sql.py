"""SQLAlchemy-backed document store."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forked.documents import Comment, Creator, Recipe, UserAccount
from forked.errors import InternalError
from forked.logging_config import get_logger
from forked.models import CommentRow, RecipeRow, UserRow
from forked.normalize.ingredients import Ingredient
from forked.store.base import DocumentStore

logger = get_logger(__name__)


def _recipe_from_row(row: RecipeRow) -> Recipe:
    return Recipe(
        id=row.id,
        name=row.name,
        ingredients=[Ingredient.from_document(doc) for doc in row.ingredients or []],
        instructions=list(row.instructions or []),
        image_url=row.image_url,
        creator=Creator(**row.creator),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _recipe_columns(fields: dict[str, Any]) -> dict[str, Any]:
    """Map recipe attribute values onto their column representation."""
    values = dict(fields)
    if "ingredients" in values:
        values["ingredients"] = [ing.to_document() for ing in values["ingredients"]]
    if "creator" in values:
        creator: Creator = values["creator"]
        values["creator"] = creator.to_document()
        values["creator_id"] = creator.id
    return values


def _user_from_row(row: UserRow) -> UserAccount:
    return UserAccount(
        id=row.id,
        email=row.email,
        name=row.name,
        hashed_password=row.hashed_password,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _comment_from_row(row: CommentRow) -> Comment:
    return Comment(
        id=row.id,
        recipe_name=row.recipe_name,
        user_id=row.user_id,
        user_name=row.user_name,
        text=row.text,
        created_at=row.created_at,
    )


class SqlDocumentStore(DocumentStore):
    """Document store over a single request-scoped AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Translate storage failures into InternalError."""
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Document store failure during {operation}: {e}")
            await self.session.rollback()
            raise InternalError(f"Document store unavailable during {operation}") from e

    # =========================================================================
    # Recipes
    # =========================================================================

    async def find_recipes_by_ids(self, recipe_ids: list[str]) -> list[Recipe]:
        async with self._guard("find_recipes_by_ids"):
            result = await self.session.execute(
                select(RecipeRow).where(RecipeRow.id.in_(set(recipe_ids)))
            )
            return [_recipe_from_row(row) for row in result.scalars()]

    async def find_recipe_by_id(self, recipe_id: str) -> Recipe | None:
        async with self._guard("find_recipe_by_id"):
            row = await self.session.get(RecipeRow, recipe_id)
            return _recipe_from_row(row) if row else None

    async def find_recipe_by_name(self, name: str) -> Recipe | None:
        async with self._guard("find_recipe_by_name"):
            result = await self.session.execute(
                select(RecipeRow).where(RecipeRow.name == name).limit(1)
            )
            row = result.scalar_one_or_none()
            return _recipe_from_row(row) if row else None

    async def list_recipes(self) -> list[Recipe]:
        async with self._guard("list_recipes"):
            result = await self.session.execute(select(RecipeRow))
            return [_recipe_from_row(row) for row in result.scalars()]

    async def list_recipes_by_creator(self, creator_id: str) -> list[Recipe]:
        async with self._guard("list_recipes_by_creator"):
            result = await self.session.execute(
                select(RecipeRow).where(RecipeRow.creator_id == creator_id)
            )
            return [_recipe_from_row(row) for row in result.scalars()]

    async def insert_recipe(self, recipe: Recipe) -> str:
        async with self._guard("insert_recipe"):
            row = RecipeRow(
                name=recipe.name,
                image_url=recipe.image_url,
                instructions=list(recipe.instructions),
                created_at=recipe.created_at,
                updated_at=recipe.updated_at,
                **_recipe_columns(
                    {"ingredients": recipe.ingredients, "creator": recipe.creator}
                ),
            )
            self.session.add(row)
            await self.session.commit()
            return row.id

    async def update_recipe(self, recipe_id: str, fields: dict[str, Any]) -> int:
        async with self._guard("update_recipe"):
            result = await self.session.execute(
                update(RecipeRow)
                .where(RecipeRow.id == recipe_id)
                .values(**_recipe_columns(fields))
            )
            await self.session.commit()
            return result.rowcount

    # =========================================================================
    # Users
    # =========================================================================

    async def find_user_by_id(self, user_id: str) -> UserAccount | None:
        async with self._guard("find_user_by_id"):
            row = await self.session.get(UserRow, user_id)
            return _user_from_row(row) if row else None

    async def find_user_by_email(self, email: str) -> UserAccount | None:
        async with self._guard("find_user_by_email"):
            result = await self.session.execute(select(UserRow).where(UserRow.email == email))
            row = result.scalar_one_or_none()
            return _user_from_row(row) if row else None

    async def insert_user(self, user: UserAccount) -> str:
        async with self._guard("insert_user"):
            row = UserRow(
                email=user.email,
                name=user.name,
                hashed_password=user.hashed_password,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
            self.session.add(row)
            await self.session.commit()
            return row.id

    async def update_user(self, user_id: str, fields: dict[str, Any]) -> int:
        async with self._guard("update_user"):
            result = await self.session.execute(
                update(UserRow).where(UserRow.id == user_id).values(**fields)
            )
            await self.session.commit()
            return result.rowcount

    # =========================================================================
    # Comments
    # =========================================================================

    async def insert_comment(self, comment: Comment) -> str:
        async with self._guard("insert_comment"):
            row = CommentRow(
                recipe_name=comment.recipe_name,
                user_id=comment.user_id,
                user_name=comment.user_name,
                text=comment.text,
                created_at=comment.created_at,
            )
            self.session.add(row)
            await self.session.commit()
            return row.id

    async def list_comments_for_recipe(self, recipe_name: str) -> list[Comment]:
        async with self._guard("list_comments_for_recipe"):
            result = await self.session.execute(
                select(CommentRow)
                .where(CommentRow.recipe_name == recipe_name)
                .order_by(CommentRow.created_at.desc())
            )
            return [_comment_from_row(row) for row in result.scalars()]

    async def delete_comment(self, comment_id: str, recipe_name: str, user_id: str) -> int:
        async with self._guard("delete_comment"):
            result = await self.session.execute(
                delete(CommentRow).where(
                    CommentRow.id == comment_id,
                    CommentRow.recipe_name == recipe_name,
                    CommentRow.user_id == user_id,
                )
            )
            await self.session.commit()
            return result.rowcount
