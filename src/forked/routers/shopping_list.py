"""API routes for aggregated shopping lists."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from forked.dependencies import get_aggregator
from forked.errors import ForkedError, to_http_exception
from forked.logging_config import get_logger
from forked.schemas import (
    ShoppingListQueryResponse,
    ShoppingListRequest,
    ShoppingListResponse,
)
from forked.shopping.aggregator import ShoppingListAggregator

logger = get_logger(__name__)

router = APIRouter(prefix="/forked", tags=["shopping-list"])


@router.post("/lista-spesa", response_model=ShoppingListResponse)
async def create_shopping_list(
    request: ShoppingListRequest,
    aggregator: ShoppingListAggregator = Depends(get_aggregator),
) -> ShoppingListResponse:
    """
    Build a shopping list for the recipes in the body.

    Quantities of ingredients with the same name and unit are summed across
    recipes and multiplied by the number of guests.
    """
    logger.info(f"Shopping list requested: recipes={request.ricette}, guests={request.persone}")

    try:
        shopping_list = await aggregator.aggregate(request.ricette, request.persone)
        return ShoppingListResponse.from_shopping_list(shopping_list)
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to generate shopping list: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate shopping list",
        )


@router.get("/lista-spesa", response_model=ShoppingListQueryResponse)
async def get_shopping_list(
    ricette: Annotated[str | None, Query(description="Comma-separated recipe ids")] = None,
    persone: Annotated[str | None, Query(description="Number of guests")] = None,
    aggregator: ShoppingListAggregator = Depends(get_aggregator),
) -> ShoppingListQueryResponse:
    """Build a shopping list from query parameters, echoing the guest count."""
    logger.info(f"Shopping list requested via query: recipes={ricette}, guests={persone}")

    try:
        shopping_list = await aggregator.aggregate_from_query(ricette, persone)
        return ShoppingListQueryResponse.from_shopping_list(shopping_list)
    except ForkedError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        logger.error(f"Failed to generate shopping list: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate shopping list",
        )
