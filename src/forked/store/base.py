"""Document store interface consumed by services and the aggregator."""

from abc import ABC, abstractmethod
from typing import Any

from forked.documents import Comment, Recipe, UserAccount


class DocumentStore(ABC):
    """
    Typed access to the users, recipes and comments collections.

    Implementations must raise InternalError for storage failures so callers
    only ever see the domain error taxonomy.
    """

    # =========================================================================
    # Recipes
    # =========================================================================

    @abstractmethod
    async def find_recipes_by_ids(self, recipe_ids: list[str]) -> list[Recipe]:
        """
        Fetch the stored recipes whose id is in recipe_ids.

        Each stored recipe appears at most once, even when its id is repeated
        in the request.
        """

    @abstractmethod
    async def find_recipe_by_id(self, recipe_id: str) -> Recipe | None:
        """Fetch one recipe by id."""

    @abstractmethod
    async def find_recipe_by_name(self, name: str) -> Recipe | None:
        """Fetch one recipe by its exact name."""

    @abstractmethod
    async def list_recipes(self) -> list[Recipe]:
        """Fetch all recipes."""

    @abstractmethod
    async def list_recipes_by_creator(self, creator_id: str) -> list[Recipe]:
        """Fetch all recipes created by the given user."""

    @abstractmethod
    async def insert_recipe(self, recipe: Recipe) -> str:
        """Store a new recipe and return its assigned id."""

    @abstractmethod
    async def update_recipe(self, recipe_id: str, fields: dict[str, Any]) -> int:
        """
        Overwrite the given fields of a recipe.

        Args:
            recipe_id: Recipe to update.
            fields: Recipe attribute names mapped to their new values.

        Returns:
            Number of modified recipes (0 or 1).
        """

    # =========================================================================
    # Users
    # =========================================================================

    @abstractmethod
    async def find_user_by_id(self, user_id: str) -> UserAccount | None:
        """Fetch one user by id."""

    @abstractmethod
    async def find_user_by_email(self, email: str) -> UserAccount | None:
        """Fetch one user by email."""

    @abstractmethod
    async def insert_user(self, user: UserAccount) -> str:
        """Store a new user and return its assigned id."""

    @abstractmethod
    async def update_user(self, user_id: str, fields: dict[str, Any]) -> int:
        """Overwrite the given fields of a user; returns the modified count."""

    # =========================================================================
    # Comments
    # =========================================================================

    @abstractmethod
    async def insert_comment(self, comment: Comment) -> str:
        """Store a new comment and return its assigned id."""

    @abstractmethod
    async def list_comments_for_recipe(self, recipe_name: str) -> list[Comment]:
        """Fetch all comments of a recipe, newest first."""

    @abstractmethod
    async def delete_comment(self, comment_id: str, recipe_name: str, user_id: str) -> int:
        """Delete a comment matching all three filters; returns the deleted count."""
