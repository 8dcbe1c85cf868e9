# cartly/services/connectivity_service.py
from cartly.domain.actions import SetOnlineStatus
from cartly.services.store import Store
from cartly.utils.logging import get_logger

logger = get_logger(__name__)


class ConnectivityService:
    """Zdarzenia online/offline -> flaga w stanie (tylko informacyjna)."""

    def __init__(self, store: Store):
        self.store = store

    @property
    def is_online(self) -> bool:
        return self.store.state.is_online

    def handle_online(self) -> None:
        if not self.is_online:
            logger.info("Connectivity: online")
        self.store.dispatch(SetOnlineStatus(True))

    def handle_offline(self) -> None:
        if self.is_online:
            logger.warning("Connectivity: offline")
        self.store.dispatch(SetOnlineStatus(False))
