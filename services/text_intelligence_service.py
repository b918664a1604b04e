"""
Deepgram Text Intelligence client.
Sends one analysis request per call to the /v1/read endpoint.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

import httpx

from app.schemas.text_intelligence import AnalysisOptions, AnalysisRequest

logger = logging.getLogger(__name__)


class OutcomeStatus(str, Enum):
    """How a provider round-trip ended."""
    SUCCESS = "success"
    REMOTE_ERROR = "remote_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class RemoteOutcome:
    """Result of a single provider call."""
    status: OutcomeStatus
    results: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS


def _remote_error_message(response: httpx.Response) -> str:
    """Extract the provider's error text from a failed response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        for key in ("err_msg", "message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value

    return response.text or f"Text intelligence request failed with status {response.status_code}"


class TextIntelligenceService:
    """
    HTTP client for Deepgram's text intelligence API.

    No retries are attempted: every call is exactly one round-trip.

    Usage:
        service = TextIntelligenceService(api_key="...")
        outcome = service.analyze(AnalysisRequest(text="Hello"), AnalysisOptions(topics=True))
        if outcome.ok:
            print(outcome.results)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.deepgram.com/v1/read",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url
        self.timeout = timeout

        self.client = httpx.Client(
            timeout=httpx.Timeout(timeout),
            headers={
                "Authorization": f"Token {api_key}",
                "User-Agent": "text-intelligence-backend/1.0",
            },
            transport=transport
        )
        logger.info("TextIntelligenceService initialized")

    def analyze(self, analysis_req: AnalysisRequest, options: AnalysisOptions) -> RemoteOutcome:
        """
        Run one analysis against the provider.

        Args:
            analysis_req: Validated request holding either text or url
            options: Features to enable

        Returns:
            RemoteOutcome describing success, a provider error or a transport failure

        Raises:
            ValueError: if a successful response does not carry JSON
        """
        params = options.to_query_params()
        logger.debug(f"POST {self.base_url} params={params}")

        try:
            response = self.client.post(
                self.base_url,
                params=params,
                json=analysis_req.provider_body()
            )
        except httpx.RequestError as e:
            logger.warning(f"Text intelligence transport failure: {e}")
            return RemoteOutcome(OutcomeStatus.TRANSPORT_ERROR, error=str(e) or type(e).__name__)

        if response.is_error:
            message = _remote_error_message(response)
            logger.warning(f"Text intelligence request rejected ({response.status_code}): {message}")
            return RemoteOutcome(OutcomeStatus.REMOTE_ERROR, error=message)

        payload = response.json()
        results = payload.get("results") if isinstance(payload, dict) else None
        return RemoteOutcome(OutcomeStatus.SUCCESS, results=results or {})

    def close(self):
        self.client.close()
