from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response

from ..exceptions import WeatherBarError


class ProviderError(WeatherBarError):
    """Base provider error."""


class ProviderInitError(ProviderError):
    """Raised when a provider cannot be configured (missing key, bad language)."""


class ProviderQueryError(ProviderError):
    """Raised when a request fails or returns an unusable body."""


class QuotaExceeded(ProviderQueryError):
    """Raised when a provider reports a quota/usage limit issue."""


class EmptyConditionListError(ProviderQueryError):
    """Raised when a response carries no weather condition entries."""


@dataclass
class RequestConfig:
    timeout: float = 10.0


class WeatherProvider:
    """Base class that adds timeouts and error mapping for HTTP providers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or self._build_session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _build_session(self) -> requests.Session:
        return requests.Session()

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise ProviderQueryError(f"HTTP {response.status_code}: {_api_message(response)}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderQueryError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderQueryError("request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ProviderQueryError("invalid json") from exc
        if not isinstance(data, dict):
            raise ProviderQueryError("unexpected json payload")
        return data


def _api_message(response: Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason or "error"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or "error"


__all__ = [
    "WeatherProvider",
    "ProviderError",
    "ProviderInitError",
    "ProviderQueryError",
    "QuotaExceeded",
    "EmptyConditionListError",
    "RequestConfig",
]
