# cartly/utils/retry.py
from tenacity import retry, retry_if_exception, retry_if_exception_type, stop_after_attempt, wait_exponential
import requests
import redis


def is_transient_http_error(exc: BaseException) -> bool:
    """Zerwane polaczenie, timeout albo 5xx. 4xx i zla odpowiedz nie poprawia sie przy powtorce."""
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError):
        response = exc.response
        return response is not None and response.status_code >= 500
    return False


def http_retry(attempts: int = 3):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(is_transient_http_error),
    )


def redis_retry(attempts: int = 3):
    #bledy komend (np. WRONGTYPE) nie sa ponawiane
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type((redis.ConnectionError, redis.TimeoutError)),
    )
