"""Request and response schemas for the HTTP API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from forked.documents import Comment, Recipe, UserAccount, UserContext
from forked.shopping.aggregator import ShoppingList


class WireModel(BaseModel):
    """Base for models whose wire names differ from their attribute names."""

    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Auth and users
# =============================================================================


class RegisterRequest(BaseModel):
    email: str | None = None
    password: str | None = None
    name: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UserSummary(BaseModel):
    """Public user identity."""

    id: str
    name: str
    email: str

    @classmethod
    def from_context(cls, user: UserContext) -> "UserSummary":
        return cls(id=user.id, name=user.name, email=user.email)


class AuthResponse(BaseModel):
    token: str
    user: UserSummary


class ProfileResponse(WireModel):
    """User profile without the password hash."""

    id: str = Field(alias="_id")
    email: str
    name: str
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_account(cls, account: UserAccount) -> "ProfileResponse":
        return cls(
            id=account.id,
            email=account.email,
            name=account.name,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class ProfileUpdateRequest(BaseModel):
    name: str | None = None
    email: str | None = None


class MessageResponse(BaseModel):
    message: str


# =============================================================================
# Recipes
# =============================================================================


class RecipeRequest(WireModel):
    """Recipe fields as sent by clients; shapes are checked by the recipe service."""

    name: Any = None
    ingredients: Any = None
    instructions: Any = None
    image_url: Any = Field(default=None, alias="imageUrl")


class CreatorResponse(BaseModel):
    id: str
    name: str
    email: str


class RecipeResponse(WireModel):
    """Stored recipe as returned to clients."""

    id: str | None = Field(default=None, alias="_id")
    name: str
    ingredients: list[dict[str, Any]]
    instructions: list[str]
    image_url: str | None = Field(default=None, alias="imageUrl")
    creator: CreatorResponse = Field(alias="creatore")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(
            id=recipe.id,
            name=recipe.name,
            ingredients=[ing.to_document() for ing in recipe.ingredients],
            instructions=recipe.instructions,
            image_url=recipe.image_url,
            creator=CreatorResponse(**recipe.creator.to_document()),
            created_at=recipe.created_at,
            updated_at=recipe.updated_at,
        )


class RecipeCreatedResponse(WireModel):
    message: str
    recipe_id: str = Field(alias="recipeId")
    recipe: RecipeResponse


class RecipeUpdatedResponse(BaseModel):
    message: str
    recipe: RecipeResponse


# =============================================================================
# Shopping list
# =============================================================================


class ShoppingListRequest(BaseModel):
    """Body of the shopping list request; validated by the aggregator."""

    ricette: Any = None
    persone: Any = None


class ShoppingListItemResponse(BaseModel):
    """Aggregated line; name and unit are echoed as stored."""

    nome: Any
    quantita: int | float
    unita: Any


class ShoppingListResponse(WireModel):
    """Shopping list for a body request."""

    line_items: list[ShoppingListItemResponse] = Field(alias="listaSpesa")
    recipe_names: list[str] = Field(alias="ricette")

    @classmethod
    def from_shopping_list(cls, shopping_list: ShoppingList) -> "ShoppingListResponse":
        return cls(
            line_items=[
                ShoppingListItemResponse(**item.to_document())
                for item in shopping_list.line_items
            ],
            recipe_names=shopping_list.recipe_names,
        )


class ShoppingListQueryResponse(ShoppingListResponse):
    """Shopping list for a query request, echoing the guest count."""

    guest_count: int = Field(alias="persone")
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_shopping_list(cls, shopping_list: ShoppingList) -> "ShoppingListQueryResponse":
        base = ShoppingListResponse.from_shopping_list(shopping_list)
        return cls(
            line_items=base.line_items,
            recipe_names=base.recipe_names,
            guest_count=shopping_list.guest_count,
            created_at=shopping_list.created_at,
        )


# =============================================================================
# Comments
# =============================================================================


class CommentRequest(BaseModel):
    testo: str | None = None


class CommentAuthor(WireModel):
    id: str = Field(alias="_id")
    name: str


class CommentResponse(WireModel):
    """Comment as listed under a recipe."""

    id: str = Field(alias="_id")
    testo: str
    created_at: datetime = Field(alias="createdAt")
    user: CommentAuthor

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            testo=comment.text,
            created_at=comment.created_at,
            user=CommentAuthor(id=comment.user_id, name=comment.user_name),
        )


class CommentCreatedResponse(WireModel):
    """Newly stored comment, in its stored shape."""

    id: str = Field(alias="_id")
    nome_ricetta: str = Field(alias="nomeRicetta")
    user_id: str = Field(alias="userId")
    user_nome: str = Field(alias="userNome")
    testo: str
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentCreatedResponse":
        return cls(
            id=comment.id,
            nome_ricetta=comment.recipe_name,
            user_id=comment.user_id,
            user_nome=comment.user_name,
            testo=comment.text,
            created_at=comment.created_at,
        )
