# cartly/services/analytics_service.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from cartly.celery_worker import celery_app
from cartly.domain.schemas import Product
from cartly.utils.logging import get_logger

logger = get_logger(__name__)


class AnalyticsService:
    """
    Zdarzenia analityczne wysylane asynchronicznie przez Celery.
    Blad kolejki nigdy nie blokuje operacji na koszyku - tylko warning w logach.
    """

    @staticmethod
    def track(event: str, payload: Dict[str, Any]) -> None:
        data = {**payload, "timestamp": datetime.now(timezone.utc).isoformat()}
        try:
            track_event_task.delay(event, data)
        except Exception as e:
            logger.warning(f"Analytics event {event} not enqueued: {e}")

    def product_viewed(self, product: Product) -> None:
        self.track("product_viewed", {"product_id": product.id, "title": product.title})

    def add_to_cart(self, product: Product, variant_id: str, quantity: int) -> None:
        self.track(
            "add_to_cart",
            {
                "product_id": product.id,
                "variant_id": variant_id,
                "quantity": quantity,
                "title": product.title,
            },
        )

    def checkout_initiated(self, cart_total: Decimal, item_count: int) -> None:
        self.track(
            "checkout_initiated",
            {"cart_total": str(cart_total), "item_count": item_count},
        )


@celery_app.task(name="cartly.services.analytics_service.track_event_task")
def track_event_task(event: str, payload: Dict[str, Any]):
    """
    Celery task - w prawdziwym systemie wyslalby zdarzenie do narzedzia analitycznego.
    Teraz tylko loguje.
    """
    logger.info(f"[ANALYTICS] {event} {payload}")
    return {"event": event, "status": "tracked"}
