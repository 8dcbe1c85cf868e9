# cartly/services/notification_service.py
import threading
import time
import uuid
from typing import Callable, Dict, Iterable, List, Protocol

from cartly.domain.actions import AddNotification, RemoveNotification
from cartly.domain.schemas import AppState, Notification, NotificationKind
from cartly.services.store import Store
from cartly.utils.logging import get_logger
from cartly.utils.settings import (
    NOTIFICATION_BASE_TIMEOUT_MS,
    NOTIFICATION_MIN_TIMEOUT_MS,
    NOTIFICATION_STACK_DELAY_MS,
)

logger = get_logger(__name__)


class Cancellable(Protocol):
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Cancellable]
Clock = Callable[[], int]


def now_ms() -> int:
    return int(time.time() * 1000)


def start_timer(seconds: float, callback: Callable[[], None]) -> Cancellable:
    timer = threading.Timer(seconds, callback)
    timer.daemon = True
    timer.start()
    return timer


def expiry_delay_ms(
    age_ms: int,
    position: int,
    base_timeout_ms: int = NOTIFICATION_BASE_TIMEOUT_MS,
    stack_delay_ms: int = NOTIFICATION_STACK_DELAY_MS,
    min_timeout_ms: int = NOTIFICATION_MIN_TIMEOUT_MS,
) -> int:
    """Nowsze powiadomienia nizej w kolejce zyja troche dluzej - nie znikaja wszystkie naraz."""
    return max(base_timeout_ms - age_ms + position * stack_delay_ms, min_timeout_ms)


class NotificationService:
    """
    Kolejka powiadomien z automatycznym wygasaniem.
    - Active -> Dismissed (uzytkownik) albo Active -> Expired (timer)
    - przy kazdej zmianie kolejki: timery usunietych powiadomien sa anulowane,
      nowe powiadomienia dostaja dokladnie jeden timer
    """

    def __init__(
        self,
        store: Store,
        clock: Clock | None = None,
        timer_factory: TimerFactory | None = None,
        base_timeout_ms: int = NOTIFICATION_BASE_TIMEOUT_MS,
        stack_delay_ms: int = NOTIFICATION_STACK_DELAY_MS,
        min_timeout_ms: int = NOTIFICATION_MIN_TIMEOUT_MS,
    ):
        self.store = store
        self.clock = clock or now_ms
        self.timer_factory = timer_factory or start_timer
        self.base_timeout_ms = base_timeout_ms
        self.stack_delay_ms = stack_delay_ms
        self.min_timeout_ms = min_timeout_ms

        self._timers: Dict[str, Cancellable] = {}
        self._lock = threading.Lock()
        self._unsubscribe = store.subscribe(self._on_change)
        self.sync(store.state.notifications)

    #commands
    def notify(self, kind: NotificationKind, message: str) -> Notification:
        notification = Notification(
            id=uuid.uuid4().hex,
            kind=kind,
            message=message,
            timestamp=self.clock(),
        )
        logger.info(f"Notification [{kind.value}] {message}")
        self.store.dispatch(AddNotification(notification))
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(NotificationKind.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self.notify(NotificationKind.ERROR, message)

    def info(self, message: str) -> Notification:
        return self.notify(NotificationKind.INFO, message)

    def dismiss(self, notification_id: str) -> None:
        self.store.dispatch(RemoveNotification(notification_id))

    #query
    def pending(self) -> List[str]:
        with self._lock:
            return list(self._timers)

    #timery
    def sync(self, notifications: Iterable[Notification]) -> None:
        now = self.clock()
        queue = list(notifications)
        present = {n.id for n in queue}

        with self._lock:
            for stale_id in [nid for nid in self._timers if nid not in present]:
                self._timers.pop(stale_id).cancel()

            for position, notification in enumerate(queue):
                if notification.id in self._timers:
                    continue

                delay = expiry_delay_ms(
                    age_ms=now - notification.timestamp,
                    position=position,
                    base_timeout_ms=self.base_timeout_ms,
                    stack_delay_ms=self.stack_delay_ms,
                    min_timeout_ms=self.min_timeout_ms,
                )
                self._timers[notification.id] = self.timer_factory(
                    delay / 1000,
                    lambda nid=notification.id: self._expire(nid),
                )

    def _on_change(self, previous: AppState, current: AppState) -> None:
        if previous.notifications == current.notifications:
            return
        self.sync(current.notifications)

    def _expire(self, notification_id: str) -> None:
        with self._lock:
            if self._timers.pop(notification_id, None) is None:
                return
        logger.info(f"Notification {notification_id} expired")
        self.store.dispatch(RemoveNotification(notification_id))

    def close(self) -> None:
        self._unsubscribe()
        with self._lock:
            for timer in self._timers.values():
                timer.cancel()
            self._timers.clear()
