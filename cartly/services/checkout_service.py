# cartly/services/checkout_service.py
import requests

from cartly.domain.actions import SetCartId
from cartly.domain.schemas import CartLineInput
from cartly.services.analytics_service import AnalyticsService
from cartly.services.cart_service import CartService
from cartly.services.notification_service import NotificationService
from cartly.services.storefront_client import StorefrontClient, StorefrontError
from cartly.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutError(Exception):
    """Checkout odrzucony albo bez URL - zamieniany na powiadomienie, nie wychodzi poza serwis."""


class CheckoutService:
    def __init__(
        self,
        cart: CartService,
        client: StorefrontClient,
        notifications: NotificationService,
        analytics: AnalyticsService,
    ):
        self.cart = cart
        self.client = client
        self.notifications = notifications
        self.analytics = analytics

    def initiate_checkout(self) -> str | None:
        """
        Use Case: przekierowanie do checkoutu.

        1. Aktywne pozycje -> (merchandiseId, quantity)
        2. cartCreate w Storefront API
        3. URL checkoutu albo None + powiadomienie o bledzie

        Wywolujacy traktuje None jako "nie przekierowuj".
        """
        self.analytics.checkout_initiated(self.cart.cart_total, self.cart.item_count)

        lines = [
            CartLineInput(merchandise_id=item.variant_id, quantity=item.quantity)
            for item in self.cart.active_items
        ]

        try:
            result = self.client.create_cart(lines)

            #userErrors to porazka nawet gdy checkoutUrl jest obecny
            if result.user_errors:
                raise CheckoutError(result.user_errors[0].message)

            url = result.cart.checkout_url if result.cart else None
            if not url:
                raise CheckoutError("Checkout URL not found")

        except CheckoutError as e:
            logger.error(f"Checkout error: {e}")
            self.notifications.error(f"Checkout failed: {e}")
            return None
        except (requests.RequestException, StorefrontError) as e:
            logger.error(f"Checkout transport error: {e}")
            self.notifications.error("Checkout failed: could not reach the store. Please try again.")
            return None

        self.cart.store.dispatch(SetCartId(result.cart.id))
        logger.info(f"Checkout ready for remote cart {result.cart.id}")
        return url
