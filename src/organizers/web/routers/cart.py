"""Cart item endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import Response

from organizers.application.cart import create_cart_item
from organizers.application.config import load_design_from_dict
from organizers.application.dtos import LayoutDocument
from organizers.web.dependencies import CartDep, PricingDep
from organizers.web.exceptions import CartItemNotFoundError
from organizers.web.schemas.requests import CartItemRequest
from organizers.web.schemas.responses import CartItemSchema, CartSchema, ErrorResponseSchema

router = APIRouter(
    prefix="/cart-items",
    tags=["cart"],
    responses={404: {"model": ErrorResponseSchema}},
)


@router.post("", response_model=CartItemSchema, status_code=status.HTTP_201_CREATED)
async def add_cart_item(
    request: CartItemRequest, cart: CartDep, pricing: PricingDep
) -> CartItemSchema:
    """Price a design and add it to the cart."""
    document = LayoutDocument.from_config(load_design_from_dict(request.design))
    item = create_cart_item(
        document,
        pricing=pricing,
        image_2d=request.image_2d,
        image_3d=request.image_3d,
        notes=request.notes,
    )
    cart.add(item)
    return CartItemSchema.from_item(item)


@router.get("", response_model=CartSchema)
async def list_cart_items(cart: CartDep) -> CartSchema:
    return CartSchema(
        items=[CartItemSchema.from_item(item) for item in cart],
        total=cart.total(),
    )


@router.get("/{item_id}", response_model=CartItemSchema)
async def get_cart_item(item_id: str, cart: CartDep) -> CartItemSchema:
    item = cart.get(item_id)
    if item is None:
        raise CartItemNotFoundError(item_id)
    return CartItemSchema.from_item(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_cart_item(item_id: str, cart: CartDep) -> Response:
    if not cart.remove(item_id):
        raise CartItemNotFoundError(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cart(cart: CartDep) -> Response:
    cart.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
