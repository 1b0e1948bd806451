"""Use cases behind the HTTP routes."""

from forked.services.accounts import AccountService
from forked.services.comments import CommentService
from forked.services.recipes import RecipeDraft, RecipeService

__all__ = [
    "AccountService",
    "CommentService",
    "RecipeDraft",
    "RecipeService",
]
