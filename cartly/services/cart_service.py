# cartly/services/cart_service.py
from decimal import Decimal
from typing import List

from cartly.domain.actions import (
    AddToCart,
    RemoveFromCart,
    SetCartOpen,
    ToggleCart,
    ToggleSaveForLater,
    UpdateCartItem,
)
from cartly.domain.schemas import CartLineItem, Product
from cartly.services.analytics_service import AnalyticsService
from cartly.services.notification_service import NotificationService
from cartly.services.store import Store
from cartly.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka nad store.
    commands (add, update, remove, save for later) dispatchuja akcje
    query (items, total, count) liczone zawsze od aktualnego stanu, nic nie jest cache'owane
    """

    def __init__(
        self,
        store: Store,
        notifications: NotificationService,
        analytics: AnalyticsService,
    ):
        self.store = store
        self.notifications = notifications
        self.analytics = analytics

    #query - odczyt
    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return self.store.state.cart_items

    @property
    def active_items(self) -> List[CartLineItem]:
        return [i for i in self.items if not i.saved_for_later]

    @property
    def saved_items(self) -> List[CartLineItem]:
        return [i for i in self.items if i.saved_for_later]

    @property
    def cart_total(self) -> Decimal:
        return sum((i.price * i.quantity for i in self.active_items), Decimal("0.00"))

    @property
    def item_count(self) -> int:
        return sum(i.quantity for i in self.active_items)

    #commands
    def add_to_cart(self, product: Product, variant_id: str, quantity: int = 1) -> bool:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        variant = product.find_variant(variant_id)
        if variant is None:
            #brak wariantu to blad wywolujacego, nie uzytkownika - bez powiadomienia
            logger.warning(f"Variant {variant_id} not found in product {product.id}")
            return False

        image = variant.image.url if variant.image else (product.images[0].url if product.images else "")

        item = CartLineItem(
            variant_id=variant_id,
            product_id=product.id,
            title=product.title,
            variant=variant.title,
            price=variant.price.amount,
            compare_at_price=variant.compare_at_price.amount if variant.compare_at_price else None,
            quantity=quantity,
            image=image,
            available_for_sale=variant.available_for_sale,
        )

        self.store.dispatch(AddToCart(item))
        logger.info(f"Added {quantity} x {variant_id} to cart")

        self.analytics.add_to_cart(product, variant_id, quantity)
        self.notifications.success(f"{product.title} added to cart!")
        return True

    def update_quantity(self, variant_id: str, quantity: int) -> None:
        logger.info(f"Update quantity {variant_id} -> {quantity}")
        self.store.dispatch(UpdateCartItem(variant_id=variant_id, quantity=quantity))

    def remove_from_cart(self, variant_id: str) -> None:
        logger.info(f"Remove {variant_id} from cart")
        self.store.dispatch(RemoveFromCart(variant_id))
        self.notifications.info("Item removed from cart")

    def toggle_save_for_later(self, variant_id: str) -> None:
        self.store.dispatch(ToggleSaveForLater(variant_id))

    def toggle_cart(self) -> None:
        self.store.dispatch(ToggleCart())

    def close_cart(self) -> None:
        self.store.dispatch(SetCartOpen(False))
