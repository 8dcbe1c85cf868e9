# cartly/api/routers/health.py
from fastapi import APIRouter, Depends

from cartly.api.deps import get_session
from cartly.session import Session

router = APIRouter(tags=["health"])


@router.get("/health")
def health(session: Session = Depends(get_session)):
    return {
        "status": "ok",
        "online": session.connectivity.is_online,
        "products": len(session.state.products),
    }
