# cartly/session.py
from cartly.domain.schemas import AppState
from cartly.repos.storage_repo import StorageRepo
from cartly.services.analytics_service import AnalyticsService
from cartly.services.cart_service import CartService
from cartly.services.catalog_service import CatalogService
from cartly.services.checkout_service import CheckoutService
from cartly.services.connectivity_service import ConnectivityService
from cartly.services.notification_service import Clock, NotificationService, TimerFactory
from cartly.services.persistence_service import PersistenceService
from cartly.services.store import Store
from cartly.services.storefront_client import StorefrontClient
from cartly.utils.logging import get_logger

logger = get_logger(__name__)


class Session:
    """
    Korzen kompozycji: jeden store na sesje + adaptery i serwisy.
    start() odtwarza stan z magazynu i podpina subskrybentow, close() sprzata timery.
    """

    def __init__(
        self,
        storage: StorageRepo | None = None,
        client: StorefrontClient | None = None,
        analytics: AnalyticsService | None = None,
        clock: Clock | None = None,
        timer_factory: TimerFactory | None = None,
        initial: AppState | None = None,
    ):
        self.store = Store(initial)
        self.client = client or StorefrontClient()
        self.analytics = analytics or AnalyticsService()

        self.persistence = PersistenceService(storage or StorageRepo())
        self.notifications = NotificationService(self.store, clock=clock, timer_factory=timer_factory)
        self.connectivity = ConnectivityService(self.store)
        self.cart = CartService(self.store, self.notifications, self.analytics)
        self.catalog = CatalogService(self.store, self.client, self.notifications, self.analytics)
        self.checkout = CheckoutService(self.cart, self.client, self.notifications, self.analytics)

        self._started = False

    @property
    def state(self) -> AppState:
        return self.store.state

    def start(self, load_catalog: bool = True) -> "Session":
        if self._started:
            return self

        #najpierw odczyt, potem subskrypcja - zeby nie nadpisywac magazynu tym samym stanem
        self.persistence.restore(self.store)
        self.persistence.attach(self.store)
        self._started = True
        logger.info("Session started")

        if load_catalog:
            self.catalog.load_products()
        return self

    def close(self) -> None:
        self.notifications.close()
        self.persistence.detach()
        self.store.close()
        self._started = False
        logger.info("Session closed")
