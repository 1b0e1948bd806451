"""FastAPI dependencies wiring stores and services into request handlers."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from forked.auth.credentials import CredentialStore
from forked.config import Settings, get_settings
from forked.database import get_db
from forked.documents import UserContext
from forked.errors import ForkedError, to_http_exception
from forked.logging_config import bind_user
from forked.services import AccountService, CommentService, RecipeService
from forked.shopping.aggregator import ShoppingListAggregator
from forked.store.base import DocumentStore
from forked.store.sql import SqlDocumentStore

bearer_scheme = HTTPBearer(auto_error=False)


async def get_document_store(session: AsyncSession = Depends(get_db)) -> DocumentStore:
    """Request-scoped document store."""
    return SqlDocumentStore(session)


async def get_credential_store(
    store: DocumentStore = Depends(get_document_store),
    settings: Settings = Depends(get_settings),
) -> CredentialStore:
    return CredentialStore.from_settings(store, settings)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    credential_store: CredentialStore = Depends(get_credential_store),
) -> UserContext:
    """Resolve the bearer token of the request to a user, or answer 401."""
    token = credentials.credentials if credentials else None
    try:
        user = await credential_store.verify_identity(token)
    except ForkedError as e:
        raise to_http_exception(e) from e
    bind_user(user.id)
    return user


async def get_aggregator(
    store: DocumentStore = Depends(get_document_store),
) -> ShoppingListAggregator:
    return ShoppingListAggregator(store)


async def get_recipe_service(
    store: DocumentStore = Depends(get_document_store),
) -> RecipeService:
    return RecipeService(store)


async def get_comment_service(
    store: DocumentStore = Depends(get_document_store),
) -> CommentService:
    return CommentService(store)


async def get_account_service(
    store: DocumentStore = Depends(get_document_store),
    credential_store: CredentialStore = Depends(get_credential_store),
) -> AccountService:
    return AccountService(store, credential_store)


__all__ = [
    "get_account_service",
    "get_aggregator",
    "get_comment_service",
    "get_credential_store",
    "get_current_user",
    "get_document_store",
    "get_recipe_service",
]
