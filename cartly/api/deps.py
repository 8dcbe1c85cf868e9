# cartly/api/deps.py
from fastapi import Request

from cartly.session import Session


def get_session(request: Request) -> Session:
    return request.app.state.session
