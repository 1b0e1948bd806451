"""API routes for creating, editing and listing recipes."""

from fastapi import APIRouter, Depends, HTTPException, status

from forked.dependencies import get_current_user, get_recipe_service
from forked.documents import UserContext
from forked.errors import ForkedError, to_http_exception
from forked.logging_config import get_logger
from forked.schemas import (
    RecipeCreatedResponse,
    RecipeRequest,
    RecipeResponse,
    RecipeUpdatedResponse,
)
from forked.services.recipes import RecipeDraft, RecipeService

logger = get_logger(__name__)

router = APIRouter(prefix="/forked", tags=["recipes"])


def _draft(request: RecipeRequest) -> RecipeDraft:
    return RecipeDraft(
        name=request.name,
        ingredients=request.ingredients,
        instructions=request.instructions,
        image_url=request.image_url,
    )


@router.get("/recipes", response_model=list[RecipeResponse])
async def list_recipes(
    service: RecipeService = Depends(get_recipe_service),
) -> list[RecipeResponse]:
    """List all recipes."""
    try:
        recipes = await service.list_recipes()
        return [RecipeResponse.from_recipe(recipe) for recipe in recipes]
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to list recipes: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recipes",
        )


@router.post(
    "/recipes",
    response_model=RecipeCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_recipe(
    request: RecipeRequest,
    user: UserContext = Depends(get_current_user),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeCreatedResponse:
    """
    Create a recipe owned by the authenticated user.

    Ingredients may be free text ("200g pomodoro") or objects with
    nome/quantita/unita; they are normalized before being stored.
    """
    try:
        recipe = await service.create_recipe(_draft(request), user)
        return RecipeCreatedResponse(
            message="Recipe created",
            recipe_id=recipe.id,
            recipe=RecipeResponse.from_recipe(recipe),
        )
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to create recipe: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create recipe",
        )


@router.put("/recipes/{recipe_id}", response_model=RecipeUpdatedResponse)
async def update_recipe(
    recipe_id: str,
    request: RecipeRequest,
    user: UserContext = Depends(get_current_user),
    service: RecipeService = Depends(get_recipe_service),
) -> RecipeUpdatedResponse:
    """Edit a recipe; only its creator may do so."""
    try:
        recipe = await service.update_recipe(recipe_id, _draft(request), user)
        return RecipeUpdatedResponse(
            message="Recipe updated",
            recipe=RecipeResponse.from_recipe(recipe),
        )
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to update recipe {recipe_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update recipe",
        )


@router.get("/myrecipes", response_model=list[RecipeResponse])
async def list_my_recipes(
    user: UserContext = Depends(get_current_user),
    service: RecipeService = Depends(get_recipe_service),
) -> list[RecipeResponse]:
    """List the recipes created by the authenticated user."""
    try:
        recipes = await service.list_recipes_by_creator(user)
        return [RecipeResponse.from_recipe(recipe) for recipe in recipes]
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to list recipes of user {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch your recipes",
        )
