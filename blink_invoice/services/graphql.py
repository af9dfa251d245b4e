import logging
from typing import Any, Dict, Optional

import requests

from blink_invoice.core.auth import resolve_credential
from blink_invoice.core.config import Settings
from blink_invoice.core.errors import GraphQLOperationError, InvariantViolation, TransportError

logger = logging.getLogger(__name__)


class GraphQLClient:
    """POSTs GraphQL documents to the Blink endpoint.

    Endpoint and API key are looked up again on every ``send``; one call is
    exactly one HTTP round trip, never retried.
    """

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings.from_env()
        self.session = session or requests.Session()

    def get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-KEY": resolve_credential(self.settings),
        }

    def send(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = self.get_headers()
        url = self.settings.api_url
        payload = {"query": document, "variables": variables or {}}

        logger.debug(f"→ POST {url}")
        try:
            resp = self.session.post(url, json=payload, headers=headers, timeout=self.settings.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request to {url} failed: {e}") from e

        # non-2xx bodies are never read as GraphQL
        if not 200 <= resp.status_code < 300:
            raise TransportError(
                f"HTTP {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError(
                f"HTTP {resp.status_code}: response is not JSON: {resp.text[:200]}",
                status_code=resp.status_code,
                body=resp.text,
            ) from e
        if not isinstance(body, dict):
            raise TransportError(
                f"HTTP {resp.status_code}: expected a JSON object",
                status_code=resp.status_code,
                body=resp.text,
            )

        errors = body.get("errors")
        if errors:
            raise GraphQLOperationError(errors if isinstance(errors, list) else [errors])

        data = body.get("data")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InvariantViolation(f"GraphQL data must be an object, got {type(data).__name__}")
        return data
