# cartly/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _unwrap_edges(value: Any) -> Any:
    #storefront zwraca {"edges": [{"node": {...}}]}, trzymamy same node
    if isinstance(value, dict) and "edges" in value:
        return [edge["node"] for edge in value["edges"]]
    return value


class Entity(BaseModel):
    """Bazowy model encji stanu - niemutowalny, pola camelCase na zewnatrz."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# =====================================================
# CATALOG
# =====================================================
class Money(Entity):
    amount: Decimal
    currency_code: str = "INR"


class ProductImage(Entity):
    id: str | None = None
    url: str
    alt_text: str | None = None


class SelectedOption(Entity):
    name: str
    value: str


class Variant(Entity):
    id: str
    title: str
    price: Money
    compare_at_price: Money | None = None
    available_for_sale: bool = True
    selected_options: tuple[SelectedOption, ...] = ()
    image: ProductImage | None = None


class Product(Entity):
    id: str
    title: str
    handle: str = ""
    description: str = ""
    description_html: str = ""
    images: tuple[ProductImage, ...] = ()
    variants: tuple[Variant, ...] = ()
    tags: tuple[str, ...] = ()
    vendor: str = ""
    product_type: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("images", "variants", mode="before")
    @classmethod
    def unwrap_connections(cls, value: Any) -> Any:
        return _unwrap_edges(value)

    def find_variant(self, variant_id: str) -> Variant | None:
        return next((v for v in self.variants if v.id == variant_id), None)


# =====================================================
# CART
# =====================================================
class CartLineItem(Entity):
    variant_id: str
    product_id: str
    title: str
    variant: str
    price: Decimal
    compare_at_price: Decimal | None = None
    quantity: int = Field(..., ge=0)
    image: str = ""
    available_for_sale: bool = True
    saved_for_later: bool = False


class CartLineInput(Entity):
    """Pozycja wysylana do cartCreate / cartLinesAdd."""

    merchandise_id: str
    quantity: int


class CartLineUpdate(Entity):
    id: str
    quantity: int


class UserError(Entity):
    field: List[str] | None = None
    message: str


class RemoteCart(Entity):
    id: str
    checkout_url: str | None = None
    total_quantity: int | None = None


class CartMutationResult(Entity):
    """Odpowiedz mutacji cartCreate / cartLines* (cart + userErrors)."""

    cart: RemoteCart | None = None
    user_errors: List[UserError] = Field(default_factory=list)


# =====================================================
# NOTIFICATIONS
# =====================================================
class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class Notification(Entity):
    id: str
    kind: NotificationKind
    message: str
    timestamp: int  # ms od epoki


# =====================================================
# APP STATE
# =====================================================
class AppState(Entity):
    is_dark_mode: bool = False
    products: tuple[Product, ...] = ()
    is_loading_products: bool = False
    search_query: str = ""
    selected_tags: frozenset[str] = frozenset()
    cart_items: tuple[CartLineItem, ...] = ()
    is_cart_open: bool = False
    cart_id: str | None = None
    is_online: bool = True
    notifications: tuple[Notification, ...] = ()


# =====================================================
# API (request / response)
# =====================================================
class ItemIn(BaseModel):
    """Schema dla dodawania wariantu do koszyka."""

    product_id: str = Field(..., min_length=1)
    variant_id: str = Field(..., min_length=1)
    quantity: int = Field(1, gt=0, description="Ilosc (musi byc > 0)")


class QuantityIn(BaseModel):
    """Nowa ilosc - ujemne wartosci sa obcinane do 0 (usuniecie pozycji)."""

    quantity: int


class SearchIn(BaseModel):
    query: str = ""


class TagsIn(BaseModel):
    tags: List[str] = Field(default_factory=list)


class NotificationIn(BaseModel):
    kind: NotificationKind = NotificationKind.INFO
    message: str = Field(..., min_length=1)


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    items: List[CartLineItem]
    saved_items: List[CartLineItem]
    total: Decimal
    item_count: int
    is_open: bool
    cart_id: str | None = None


class CheckoutOut(BaseModel):
    checkout_url: str | None = None
