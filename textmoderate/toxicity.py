"""
Perspective toxicity client (remote, optional).

what?:
  - POSTs {comment.text, requestedAttributes} to comments:analyze and returns
    the provider's JSON untouched.

why?:
  - Keeps the only network call of the package behind one small class so the
    local filter/sentiment code stays I/O free.

No retries or backoff here; failures are logged and raised as TransportError.
"""

import json, logging
from typing import Any, Dict, Iterable, Optional

import httpx

from .errors import TransportError

logger = logging.getLogger(__name__)

ANALYZE_URL = "https://commentanalyzer.googleapis.com/v1alpha1/comments:analyze"
DEFAULT_ATTRIBUTES = ("TOXICITY",)


class PerspectiveClient:
    def __init__(self, http: Optional[httpx.AsyncClient] = None, url: str = ANALYZE_URL, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout
        self._http = http
        self._owns_http = http is None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.timeout)
        return self._http

    async def aclose(self):
        if self._http is not None and self._owns_http:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> "PerspectiveClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    @staticmethod
    def build_request(text: str, attributes: Iterable[str] = DEFAULT_ATTRIBUTES, languages: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "comment": {"text": text},
            "requestedAttributes": {a.upper(): {} for a in attributes},
        }
        if languages:
            body["languages"] = list(languages)
        return body

    async def analyze(
        self,
        text: str,
        api_key: str,
        attributes: Iterable[str] = DEFAULT_ATTRIBUTES,
        languages: Optional[Iterable[str]] = None,
    ) -> Dict[str, Any]:
        body = self.build_request(text, attributes, languages)
        try:
            resp = await self._client().post(self.url, params={"key": api_key}, json=body)
        except httpx.HTTPError as e:
            logger.error("Error analyzing toxicity: %s", e)
            raise TransportError(f"toxicity request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("Error analyzing toxicity: HTTP %s %s", resp.status_code, resp.text[:200])
            raise TransportError(f"toxicity service returned HTTP {resp.status_code}", status_code=resp.status_code)

        try:
            return resp.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error("Error analyzing toxicity: malformed response (%s)", e)
            raise TransportError("toxicity service returned a malformed response", status_code=resp.status_code) from e


def summary_score(result: Dict[str, Any], attribute: str = "TOXICITY") -> Optional[float]:
    """Pull attributeScores.<ATTR>.summaryScore.value out of a response, if present."""
    try:
        return float(result["attributeScores"][attribute.upper()]["summaryScore"]["value"])
    except (KeyError, TypeError, ValueError):
        return None
