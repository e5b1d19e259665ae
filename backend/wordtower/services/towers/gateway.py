import logging
from typing import Any, Dict, List, Optional

import requests

from wordtower.models import ExtendedWordPool, RoundList
from .errors import UpstreamUnavailableError


logger = logging.getLogger(__name__)


class UpstreamGateway:
    """Client for the remote competition API.

    Every failure (missing token, connection error, timeout, bad status or
    body) surfaces as UpstreamUnavailableError. Nothing is retried here.
    """

    def __init__(self, base_url: str, auth_token: str, timeout: float = 10,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.auth_token = auth_token
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config) -> 'UpstreamGateway':
        return cls(
            base_url=config.get('UPSTREAM_BASE_URL', ''),
            auth_token=config.get('AUTH_TOKEN', ''),
            timeout=float(config.get('UPSTREAM_TIMEOUT_SEC', 10)),
        )

    def _request(self, method: str, endpoint: str, payload: Any = None) -> Dict[str, Any]:
        if not self.auth_token:
            raise UpstreamUnavailableError('Authentication token not configured (set AUTH_TOKEN)')
        headers = {
            'accept': 'application/json',
            'X-Auth-Token': self.auth_token,
        }
        url = f"{self.base_url}{endpoint}"
        try:
            resp = self.session.request(method, url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning(f"[upstream-fail] {method} {endpoint}: {exc}")
            raise UpstreamUnavailableError(f"upstream {endpoint} unavailable: {exc}") from exc
        if not resp.ok:
            logger.warning(f"[upstream-fail] {method} {endpoint} status={resp.status_code}")
            raise UpstreamUnavailableError(f"upstream {endpoint} answered {resp.status_code}")
        try:
            body = resp.json()
        except ValueError as exc:
            raise UpstreamUnavailableError(f"upstream {endpoint} returned invalid JSON") from exc
        if not isinstance(body, dict):
            logger.warning(f"[upstream-fail] {method} {endpoint} body is {type(body).__name__}, not an object")
            raise UpstreamUnavailableError(f"upstream {endpoint} returned an unexpected payload")
        return body

    def _parse(self, endpoint: str, parser, body: dict):
        try:
            return parser(body)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning(f"[upstream-fail] {endpoint} payload rejected: {exc}")
            raise UpstreamUnavailableError(f"upstream {endpoint} returned an unexpected payload: {exc}") from exc

    def fetch_rounds(self) -> RoundList:
        return self._parse('/rounds', RoundList.from_dict, self._request('GET', '/rounds'))

    def fetch_word_pool(self) -> List[str]:
        data = self._request('POST', '/shuffle')
        words = data.get('words')
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise UpstreamUnavailableError("upstream /shuffle returned no word list")
        return list(words)

    def fetch_raw_words(self) -> ExtendedWordPool:
        return self._parse('/words', ExtendedWordPool.from_dict, self._request('GET', '/words'))
