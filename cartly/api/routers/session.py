# cartly/api/routers/session.py
from typing import List

from fastapi import APIRouter, Depends

from cartly.api.deps import get_session
from cartly.domain.actions import ToggleDarkMode
from cartly.domain.schemas import AppState, Notification, NotificationIn
from cartly.session import Session

router = APIRouter(prefix="/session", tags=["session"])


@router.get("/state", response_model=AppState)
def get_state(session: Session = Depends(get_session)):
    return session.state


@router.post("/theme/toggle")
def toggle_theme(session: Session = Depends(get_session)):
    session.store.dispatch(ToggleDarkMode())
    return {"is_dark_mode": session.state.is_dark_mode}


@router.post("/connectivity/online")
def become_online(session: Session = Depends(get_session)):
    session.connectivity.handle_online()
    return {"is_online": session.connectivity.is_online}


@router.post("/connectivity/offline")
def become_offline(session: Session = Depends(get_session)):
    session.connectivity.handle_offline()
    return {"is_online": session.connectivity.is_online}


@router.get("/notifications", response_model=List[Notification])
def list_notifications(session: Session = Depends(get_session)):
    return list(session.state.notifications)


@router.post("/notifications", response_model=Notification, status_code=201)
def add_notification(payload: NotificationIn, session: Session = Depends(get_session)):
    return session.notifications.notify(payload.kind, payload.message)


@router.delete("/notifications/{notification_id}", status_code=204)
def dismiss_notification(notification_id: str, session: Session = Depends(get_session)):
    session.notifications.dismiss(notification_id)
