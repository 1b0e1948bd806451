"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from typing import Any

import pytest
from fastapi.testclient import TestClient

from forked.auth.credentials import CredentialStore
from forked.dependencies import get_credential_store, get_document_store
from forked.documents import Comment, Creator, Recipe, UserAccount, UserContext, new_id
from forked.errors import InternalError
from forked.main import app
from forked.normalize.ingredients import Ingredient
from forked.store.base import DocumentStore

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (require external services)"
    )


# =============================================================================
# In-memory Document Store
# =============================================================================


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed document store double with the same semantics as the SQL store."""

    def __init__(self) -> None:
        self.recipes: dict[str, Recipe] = {}
        self.users: dict[str, UserAccount] = {}
        self.comments: dict[str, Comment] = {}
        self.find_calls = 0

    # Synchronous seeding helpers for tests

    def add_recipe(self, recipe: Recipe) -> Recipe:
        recipe.id = recipe.id or new_id()
        self.recipes[recipe.id] = recipe
        return recipe

    def add_user(self, user: UserAccount) -> UserAccount:
        user.id = user.id or new_id()
        self.users[user.id] = user
        return user

    # Recipes

    async def find_recipes_by_ids(self, recipe_ids: list[str]) -> list[Recipe]:
        self.find_calls += 1
        wanted = set(recipe_ids)
        return [recipe for rid, recipe in self.recipes.items() if rid in wanted]

    async def find_recipe_by_id(self, recipe_id: str) -> Recipe | None:
        return self.recipes.get(recipe_id)

    async def find_recipe_by_name(self, name: str) -> Recipe | None:
        return next((r for r in self.recipes.values() if r.name == name), None)

    async def list_recipes(self) -> list[Recipe]:
        return list(self.recipes.values())

    async def list_recipes_by_creator(self, creator_id: str) -> list[Recipe]:
        return [r for r in self.recipes.values() if r.creator.id == creator_id]

    async def insert_recipe(self, recipe: Recipe) -> str:
        stored = replace(recipe, id=new_id())
        self.recipes[stored.id] = stored
        return stored.id

    async def update_recipe(self, recipe_id: str, fields: dict[str, Any]) -> int:
        recipe = self.recipes.get(recipe_id)
        if recipe is None:
            return 0
        self.recipes[recipe_id] = replace(recipe, **fields)
        return 1

    # Users

    async def find_user_by_id(self, user_id: str) -> UserAccount | None:
        return self.users.get(user_id)

    async def find_user_by_email(self, email: str) -> UserAccount | None:
        return next((u for u in self.users.values() if u.email == email), None)

    def _check_unique_email(self, email: str, user_id: str | None = None) -> None:
        if any(u.email == email and u.id != user_id for u in self.users.values()):
            raise InternalError("Document store unavailable during unique email check")

    async def insert_user(self, user: UserAccount) -> str:
        self._check_unique_email(user.email)
        stored = replace(user, id=new_id())
        self.users[stored.id] = stored
        return stored.id

    async def update_user(self, user_id: str, fields: dict[str, Any]) -> int:
        user = self.users.get(user_id)
        if user is None:
            return 0
        if "email" in fields:
            self._check_unique_email(fields["email"], user_id)
        self.users[user_id] = replace(user, **fields)
        return 1

    # Comments

    async def insert_comment(self, comment: Comment) -> str:
        stored = replace(comment, id=new_id())
        self.comments[stored.id] = stored
        return stored.id

    async def list_comments_for_recipe(self, recipe_name: str) -> list[Comment]:
        found = [c for c in self.comments.values() if c.recipe_name == recipe_name]
        return sorted(found, key=lambda c: c.created_at, reverse=True)

    async def delete_comment(self, comment_id: str, recipe_name: str, user_id: str) -> int:
        comment = self.comments.get(comment_id)
        if comment is None or comment.recipe_name != recipe_name or comment.user_id != user_id:
            return 0
        del self.comments[comment_id]
        return 1


# =============================================================================
# Domain Fixtures
# =============================================================================


@pytest.fixture
def memory_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def credential_store(memory_store) -> CredentialStore:
    return CredentialStore(memory_store, secret=TEST_SECRET)


@pytest.fixture
def chef(memory_store) -> UserContext:
    """A registered user who authors recipes."""
    account = memory_store.add_user(
        UserAccount(
            email="chef@example.com",
            name="Chef",
            hashed_password=CredentialStore.hash_password("s3cret"),
        )
    )
    return account.to_context()


@pytest.fixture
def guest(memory_store) -> UserContext:
    """A second registered user."""
    account = memory_store.add_user(
        UserAccount(
            email="guest@example.com",
            name="Guest",
            hashed_password=CredentialStore.hash_password("hunter2"),
        )
    )
    return account.to_context()


def make_recipe(
    name: str, ingredients: list[tuple[str, int, str]], creator: UserContext
) -> Recipe:
    """Build a recipe from (name, quantity, unit) triples."""
    return Recipe(
        name=name,
        ingredients=[Ingredient(name=n, quantity=q, unit=u) for n, q, u in ingredients],
        instructions=["Cook it"],
        creator=Creator.from_user(creator),
    )


@pytest.fixture
def pasta_recipe(memory_store, chef) -> Recipe:
    """R1: tomato 200g, salt 1pz."""
    return memory_store.add_recipe(
        make_recipe("Pasta al pomodoro", [("tomato", 200, "g"), ("salt", 1, "pz")], chef)
    )


@pytest.fixture
def salad_recipe(memory_store, chef) -> Recipe:
    """R2: tomato 100g."""
    return memory_store.add_recipe(make_recipe("Insalata", [("tomato", 100, "g")], chef))


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client(memory_store, credential_store):
    """Test client whose stores are replaced by in-memory doubles."""
    app.dependency_overrides[get_document_store] = lambda: memory_store
    app.dependency_overrides[get_credential_store] = lambda: credential_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(credential_store, chef) -> dict[str, str]:
    return {"Authorization": f"Bearer {credential_store.issue_token(chef.id)}"}


@pytest.fixture
def guest_headers(credential_store, guest) -> dict[str, str]:
    return {"Authorization": f"Bearer {credential_store.issue_token(guest.id)}"}


@pytest.fixture
def recipe_factory(memory_store, chef):
    """Store a recipe built from (name, quantity, unit) triples, authored by chef."""

    def factory(name: str, ingredients: list[tuple[str, int, str]]) -> Recipe:
        return memory_store.add_recipe(make_recipe(name, ingredients, chef))

    return factory
