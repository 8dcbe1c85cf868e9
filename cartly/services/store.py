# cartly/services/store.py
import threading
from typing import Callable, List

from cartly.domain.actions import Action
from cartly.domain.reducer import reduce
from cartly.domain.schemas import AppState
from cartly.utils.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[[AppState, AppState], None]


class Store:
    """
    Jedyne zrodlo prawdy dla sesji.
    - dispatch: reduce + dopisanie akcji do logu + powiadomienie subskrybentow
    - subskrybenci dostaja (poprzedni, aktualny) stan w kolejnosci rejestracji
    - RLock: redukcje nie przeplataja sie, subskrybent moze dispatchowac ponownie z tego samego watku
    """

    def __init__(self, initial: AppState | None = None):
        self._state = initial or AppState()
        self._listeners: List[Listener] = []
        self._actions: List[Action] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    def dispatch(self, action: Action) -> AppState:
        with self._lock:
            previous = self._state
            self._state = reduce(previous, action)
            self._actions.append(action)

            if self._state is previous:
                return self._state

            #kopia listy - subskrybent moze sie wyrejestrowac w trakcie
            #zawsze najnowszy stan, bo wczesniejszy subskrybent mogl dispatchowac
            for listener in list(self._listeners):
                listener(previous, self._state)

            return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        with self._lock:
            logger.info(f"Store closed after {len(self._actions)} actions")
            self._listeners.clear()
