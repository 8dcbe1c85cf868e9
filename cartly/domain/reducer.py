# cartly/domain/reducer.py
"""
Czysta funkcja przejscia stanu: reduce(state, action) -> state.
Bez efektow ubocznych - powiadomienia, zapis i analityka dzieja sie w subskrybentach store.
"""
from cartly.domain.actions import (
    Action,
    AddNotification,
    AddToCart,
    ClearFilters,
    LoadCartFromStorage,
    RemoveFromCart,
    RemoveNotification,
    SetCartId,
    SetCartOpen,
    SetDarkMode,
    SetLoadingProducts,
    SetOnlineStatus,
    SetProducts,
    SetSearchQuery,
    SetSelectedTags,
    ToggleCart,
    ToggleDarkMode,
    ToggleSaveForLater,
    UpdateCartItem,
)
from cartly.domain.schemas import AppState, CartLineItem
from cartly.utils.settings import MAX_NOTIFICATIONS


def primary_index(items: tuple[CartLineItem, ...], variant_id: str) -> int | None:
    """
    Indeks "glownej" pozycji dla wariantu: aktywna jesli istnieje,
    w przeciwnym razie pierwsza zapisana na pozniej.
    """
    fallback = None
    for idx, item in enumerate(items):
        if item.variant_id != variant_id:
            continue
        if not item.saved_for_later:
            return idx
        if fallback is None:
            fallback = idx
    return fallback


def _find(items: tuple[CartLineItem, ...], variant_id: str, saved: bool) -> int | None:
    for idx, item in enumerate(items):
        if item.variant_id == variant_id and item.saved_for_later == saved:
            return idx
    return None


def _replace(items: tuple[CartLineItem, ...], idx: int, item: CartLineItem) -> tuple[CartLineItem, ...]:
    return items[:idx] + (item,) + items[idx + 1:]


def _drop(items: tuple[CartLineItem, ...], idx: int) -> tuple[CartLineItem, ...]:
    return items[:idx] + items[idx + 1:]


def _add_to_cart(items: tuple[CartLineItem, ...], new_item: CartLineItem) -> tuple[CartLineItem, ...]:
    #max jedna aktywna pozycja na wariant - zwiekszamy ilosc zamiast duplikowac
    idx = _find(items, new_item.variant_id, saved=False)
    if idx is None:
        return items + (new_item.model_copy(update={"saved_for_later": False}),)

    existing = items[idx]
    merged = existing.model_copy(update={"quantity": existing.quantity + new_item.quantity})
    return _replace(items, idx, merged)


def _update_quantity(items: tuple[CartLineItem, ...], variant_id: str, quantity: int) -> tuple[CartLineItem, ...]:
    idx = primary_index(items, variant_id)
    if idx is None:
        return items

    clamped = max(0, quantity)
    if clamped == 0:
        return _drop(items, idx)
    return _replace(items, idx, items[idx].model_copy(update={"quantity": clamped}))


def _remove(items: tuple[CartLineItem, ...], variant_id: str) -> tuple[CartLineItem, ...]:
    idx = primary_index(items, variant_id)
    if idx is None:
        return items
    return _drop(items, idx)


def _toggle_saved(items: tuple[CartLineItem, ...], variant_id: str) -> tuple[CartLineItem, ...]:
    idx = primary_index(items, variant_id)
    if idx is None:
        return items

    #tylko flaga - ilosc i cena bez zmian
    #pozycja glowna jest aktywna gdy taka istnieje, wiec nie powstanie druga aktywna
    target = items[idx]
    return _replace(items, idx, target.model_copy(update={"saved_for_later": not target.saved_for_later}))


def reduce(state: AppState, action: Action) -> AppState:
    match action:
        case ToggleDarkMode():
            return state.model_copy(update={"is_dark_mode": not state.is_dark_mode})
        case SetDarkMode(enabled):
            return state.model_copy(update={"is_dark_mode": enabled})
        case SetProducts(products):
            return state.model_copy(update={"products": tuple(products)})
        case SetLoadingProducts(loading):
            return state.model_copy(update={"is_loading_products": loading})
        case SetSearchQuery(query):
            return state.model_copy(update={"search_query": query})
        case SetSelectedTags(tags):
            return state.model_copy(update={"selected_tags": frozenset(tags)})
        case ClearFilters():
            return state.model_copy(update={"search_query": "", "selected_tags": frozenset()})
        case AddToCart(item):
            return state.model_copy(update={"cart_items": _add_to_cart(state.cart_items, item)})
        case UpdateCartItem(variant_id, quantity):
            return state.model_copy(
                update={"cart_items": _update_quantity(state.cart_items, variant_id, quantity)}
            )
        case RemoveFromCart(variant_id):
            return state.model_copy(update={"cart_items": _remove(state.cart_items, variant_id)})
        case ToggleSaveForLater(variant_id):
            return state.model_copy(update={"cart_items": _toggle_saved(state.cart_items, variant_id)})
        case ToggleCart():
            return state.model_copy(update={"is_cart_open": not state.is_cart_open})
        case SetCartOpen(is_open):
            return state.model_copy(update={"is_cart_open": is_open})
        case SetCartId(cart_id):
            return state.model_copy(update={"cart_id": cart_id})
        case SetOnlineStatus(is_online):
            return state.model_copy(update={"is_online": is_online})
        case AddNotification(notification):
            #najstarsze powiadomienie wypada PRZED dodaniem nowego
            current = state.notifications
            overflow = len(current) + 1 - MAX_NOTIFICATIONS
            kept = current[overflow:] if overflow > 0 else current
            return state.model_copy(update={"notifications": kept + (notification,)})
        case RemoveNotification(notification_id):
            return state.model_copy(
                update={
                    "notifications": tuple(
                        n for n in state.notifications if n.id != notification_id
                    )
                }
            )
        case LoadCartFromStorage(items):
            return state.model_copy(update={"cart_items": tuple(items)})
        case _:
            #nieznana akcja - swiadomie no-op
            return state
