# cartly/services/catalog_service.py
from typing import List

import requests

from cartly.data.demo_catalog import DEMO_PRODUCTS
from cartly.domain.actions import ClearFilters, SetLoadingProducts, SetProducts, SetSearchQuery, SetSelectedTags
from cartly.domain.filters import available_tags, filter_products, toggle_tag
from cartly.domain.schemas import Product
from cartly.services.analytics_service import AnalyticsService
from cartly.services.notification_service import NotificationService
from cartly.services.storefront_client import StorefrontClient, StorefrontError
from cartly.services.store import Store
from cartly.utils.logging import get_logger
from cartly.utils.settings import PRODUCTS_PAGE_SIZE

logger = get_logger(__name__)


class CatalogService:
    """
    Katalog produktow + kryteria filtrowania.
    Ladowanie dwuetapowe: Storefront API, a przy pustym wyniku / bledzie katalog demo.
    """

    def __init__(
        self,
        store: Store,
        client: StorefrontClient,
        notifications: NotificationService,
        analytics: AnalyticsService,
    ):
        self.store = store
        self.client = client
        self.notifications = notifications
        self.analytics = analytics

    #commands
    def load_products(self, first: int = PRODUCTS_PAGE_SIZE) -> tuple[Product, ...]:
        self.store.dispatch(SetLoadingProducts(True))
        try:
            products = self.client.get_products(first)
            if products:
                logger.info(f"Loaded {len(products)} products from Storefront API")
                self.store.dispatch(SetProducts(tuple(products)))
            else:
                logger.info("Storefront returned no products, using demo catalog")
                self.store.dispatch(SetProducts(DEMO_PRODUCTS))
                self.notifications.info("No products found in store. Using demo products.")
        except (requests.RequestException, StorefrontError) as e:
            logger.error(f"Failed to load products from Storefront API: {e}")
            self.notifications.error("Failed to connect to Shopify. Using demo products.")
            self.store.dispatch(SetProducts(DEMO_PRODUCTS))
        finally:
            self.store.dispatch(SetLoadingProducts(False))

        return self.store.state.products

    def set_search_query(self, query: str) -> None:
        self.store.dispatch(SetSearchQuery(query))

    def set_selected_tags(self, tags) -> None:
        self.store.dispatch(SetSelectedTags(frozenset(tags)))

    def toggle_tag(self, tag: str) -> None:
        self.store.dispatch(SetSelectedTags(toggle_tag(self.store.state.selected_tags, tag)))

    def clear_filters(self) -> None:
        self.store.dispatch(ClearFilters())

    def view_product(self, product_id: str) -> Product | None:
        product = self.get_product(product_id)
        if product is not None:
            self.analytics.product_viewed(product)
        return product

    #query
    def get_product(self, product_id: str) -> Product | None:
        return next((p for p in self.store.state.products if p.id == product_id), None)

    def visible_products(self) -> List[Product]:
        state = self.store.state
        return filter_products(state.products, state.search_query, state.selected_tags)

    def tags(self) -> List[str]:
        return available_tags(self.store.state.products)
