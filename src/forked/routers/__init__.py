"""API routers for the Forked application."""

from forked.routers.comments import router as comments_router
from forked.routers.recipes import router as recipes_router
from forked.routers.shopping_list import router as shopping_list_router
from forked.routers.users import router as users_router

__all__ = [
    "comments_router",
    "recipes_router",
    "shopping_list_router",
    "users_router",
]
