# cartly/domain/actions.py
"""
Zamkniety zbior akcji reducera.
Kazda akcja to niemutowalny dataclass - typ klasy jest etykieta, pola to payload.
"""
from dataclasses import dataclass
from typing import Union

from cartly.domain.schemas import CartLineItem, Notification, Product


@dataclass(frozen=True)
class ToggleDarkMode:
    pass


@dataclass(frozen=True)
class SetDarkMode:
    enabled: bool


@dataclass(frozen=True)
class SetProducts:
    products: tuple[Product, ...]


@dataclass(frozen=True)
class SetLoadingProducts:
    loading: bool


@dataclass(frozen=True)
class SetSearchQuery:
    query: str


@dataclass(frozen=True)
class SetSelectedTags:
    tags: frozenset[str]


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class AddToCart:
    item: CartLineItem


@dataclass(frozen=True)
class UpdateCartItem:
    variant_id: str
    quantity: int


@dataclass(frozen=True)
class RemoveFromCart:
    variant_id: str


@dataclass(frozen=True)
class ToggleSaveForLater:
    variant_id: str


@dataclass(frozen=True)
class ToggleCart:
    pass


@dataclass(frozen=True)
class SetCartOpen:
    is_open: bool


@dataclass(frozen=True)
class SetCartId:
    cart_id: str


@dataclass(frozen=True)
class SetOnlineStatus:
    is_online: bool


@dataclass(frozen=True)
class AddNotification:
    notification: Notification


@dataclass(frozen=True)
class RemoveNotification:
    notification_id: str


@dataclass(frozen=True)
class LoadCartFromStorage:
    items: tuple[CartLineItem, ...]


Action = Union[
    ToggleDarkMode,
    SetDarkMode,
    SetProducts,
    SetLoadingProducts,
    SetSearchQuery,
    SetSelectedTags,
    ClearFilters,
    AddToCart,
    UpdateCartItem,
    RemoveFromCart,
    ToggleSaveForLater,
    ToggleCart,
    SetCartOpen,
    SetCartId,
    SetOnlineStatus,
    AddNotification,
    RemoveNotification,
    LoadCartFromStorage,
]
