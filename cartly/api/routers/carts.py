# cartly/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException

from cartly.api.deps import get_session
from cartly.domain.schemas import CartOut, CheckoutOut, ItemIn, QuantityIn
from cartly.session import Session

router = APIRouter(prefix="/cart", tags=["cart"])


def _cart_out(session: Session) -> CartOut:
    cart = session.cart
    return CartOut(
        items=cart.active_items,
        saved_items=cart.saved_items,
        total=cart.cart_total,
        item_count=cart.item_count,
        is_open=session.state.is_cart_open,
        cart_id=session.state.cart_id,
    )


@router.get("/", response_model=CartOut)
def get_cart(session: Session = Depends(get_session)):
    return _cart_out(session)


@router.post("/items", response_model=CartOut)
def add_item(payload: ItemIn, session: Session = Depends(get_session)):
    product = session.catalog.get_product(payload.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")

    if not session.cart.add_to_cart(product, payload.variant_id, payload.quantity):
        raise HTTPException(status_code=404, detail="Variant not found")

    return _cart_out(session)


@router.post("/items/{variant_id:path}/save-for-later", response_model=CartOut)
def toggle_save_for_later(variant_id: str, session: Session = Depends(get_session)):
    session.cart.toggle_save_for_later(variant_id)
    return _cart_out(session)


@router.patch("/items/{variant_id:path}", response_model=CartOut)
def update_item(variant_id: str, payload: QuantityIn, session: Session = Depends(get_session)):
    session.cart.update_quantity(variant_id, payload.quantity)
    return _cart_out(session)


@router.delete("/items/{variant_id:path}", response_model=CartOut)
def remove_item(variant_id: str, session: Session = Depends(get_session)):
    session.cart.remove_from_cart(variant_id)
    return _cart_out(session)


@router.post("/toggle", response_model=CartOut)
def toggle_cart(session: Session = Depends(get_session)):
    session.cart.toggle_cart()
    return _cart_out(session)


@router.post("/checkout", response_model=CheckoutOut)
def checkout(session: Session = Depends(get_session)):
    url = session.checkout.initiate_checkout()
    if url:
        session.notifications.success("Redirecting to checkout...")
        session.cart.close_cart()
    return CheckoutOut(checkout_url=url)
