# cartly/services/persistence_service.py
from typing import List

from pydantic import TypeAdapter, ValidationError
from redis.exceptions import RedisError

from cartly.domain.actions import LoadCartFromStorage, SetDarkMode
from cartly.domain.schemas import AppState, CartLineItem
from cartly.repos.storage_repo import StorageRepo
from cartly.services.store import Store
from cartly.utils.logging import get_logger
from cartly.utils.settings import CART_STORAGE_KEY, THEME_STORAGE_KEY

logger = get_logger(__name__)

_cart_adapter = TypeAdapter(List[CartLineItem])


class PersistenceService:
    """
    Zapis koszyka i motywu w magazynie klucz-wartosc.
    - odczyt raz przy starcie (restore)
    - zapis przy kazdej zmianie koszyka / motywu (subskrybent store)
    Trwalosc best-effort: bledy magazynu sa logowane, nigdy nie przerywaja sesji.
    """

    def __init__(
        self,
        storage: StorageRepo,
        cart_key: str = CART_STORAGE_KEY,
        theme_key: str = THEME_STORAGE_KEY,
    ):
        self.storage = storage
        self.cart_key = cart_key
        self.theme_key = theme_key
        self._unsubscribe = None

    def load_cart(self) -> List[CartLineItem]:
        try:
            raw = self.storage.get(self.cart_key)
        except RedisError as e:
            logger.warning(f"Cart load error (storage): {e}")
            return []

        if not raw:
            return []

        try:
            items = _cart_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Cart load error, starting with empty cart: {e}")
            return []

        return [i for i in items if i.quantity > 0]

    def load_dark_mode(self) -> bool:
        try:
            return self.storage.get(self.theme_key) == "true"
        except RedisError as e:
            logger.warning(f"Theme load error (storage): {e}")
            return False

    def restore(self, store: Store) -> None:
        items = self.load_cart()
        if items:
            logger.info(f"Restored {len(items)} cart lines from storage")
            store.dispatch(LoadCartFromStorage(tuple(items)))

        if self.load_dark_mode():
            store.dispatch(SetDarkMode(True))

    def save_cart(self, items: tuple[CartLineItem, ...]) -> None:
        payload = _cart_adapter.dump_json(list(items), by_alias=True).decode()
        try:
            self.storage.set(self.cart_key, payload)
        except RedisError as e:
            logger.warning(f"Cart save error: {e}")

    def save_dark_mode(self, enabled: bool) -> None:
        try:
            self.storage.set(self.theme_key, "true" if enabled else "false")
        except RedisError as e:
            logger.warning(f"Theme save error: {e}")

    def attach(self, store: Store) -> None:
        self._unsubscribe = store.subscribe(self._on_change)

    def detach(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_change(self, previous: AppState, current: AppState) -> None:
        if previous.cart_items != current.cart_items:
            self.save_cart(current.cart_items)
        if previous.is_dark_mode != current.is_dark_mode:
            self.save_dark_mode(current.is_dark_mode)
