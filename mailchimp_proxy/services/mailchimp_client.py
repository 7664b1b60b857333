# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""HTTP client for the Mailchimp Marketing API (v3)."""
import time
from typing import Any, Dict, Optional

import httpx

from mailchimp_proxy.core.config import settings
from mailchimp_proxy.core.errors import RemoteError
from mailchimp_proxy.core.logging import get_logger
from mailchimp_proxy.metrics import MAILCHIMP_CALLS, MAILCHIMP_LATENCY

logger = get_logger(__name__)


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        title, detail = body.get("title"), body.get("detail")
        if title and detail:
            return f"{title}: {detail}"
        if title or detail:
            return str(title or detail)
    return f"Mailchimp responded with HTTP {resp.status_code}"


class MailChimpClient:
    """One pooled connection per process; every failure surfaces as RemoteError."""

    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self._http = httpx.Client(
            base_url=base_url or settings.MAILCHIMP_BASE_URL,
            auth=("apikey", api_key if api_key is not None else settings.MAILCHIMP_API_KEY),
            timeout=timeout if timeout is not None else settings.MAILCHIMP_TIMEOUT,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", path, body=body)

    def put(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", path, body=body)

    def patch(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PATCH", path, body=body)

    def delete(self, path: str) -> Dict[str, Any]:
        return self._request("DELETE", path)

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None,
                 params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        start = time.time()
        try:
            resp = self._http.request(method, path, json=body, params=params)
        except httpx.HTTPError as exc:
            MAILCHIMP_CALLS.labels(method=method, outcome="transport_error").inc()
            logger.warning("Mailchimp unreachable method=%s path=%s error=%s", method, path, exc)
            raise RemoteError(str(exc) or exc.__class__.__name__) from exc
        finally:
            MAILCHIMP_LATENCY.labels(method=method).observe(time.time() - start)

        if resp.status_code >= 400:
            MAILCHIMP_CALLS.labels(method=method, outcome="http_error").inc()
            message = _error_message(resp)
            logger.warning("Mailchimp error method=%s path=%s status=%s msg=%s",
                           method, path, resp.status_code, message)
            raise RemoteError(message, resp.status_code)

        MAILCHIMP_CALLS.labels(method=method, outcome="ok").inc()
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError as exc:
            raise RemoteError(f"Mailchimp returned an unreadable body (HTTP {resp.status_code})") from exc
        return data if isinstance(data, dict) else {"data": data}
