from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SummarizeMode(str, Enum):
    """Values accepted by the ``summarize`` query parameter."""
    ENABLED = "true"
    V2 = "v2"
    V1 = "v1"  # retired by the provider, rejected


class AnalysisRequest(BaseModel):
    """
    Body of an analysis request. Exactly one of ``text`` or ``url`` is
    expected; the check lives in ``utils.validators`` so the message matches
    the public error contract.
    """
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None
    url: Optional[str] = None

    @property
    def uses_url(self) -> bool:
        return not self.text and bool(self.url)

    def provider_body(self) -> Dict[str, str]:
        if self.text:
            return {"text": self.text}
        return {"url": self.url}


class AnalysisOptions(BaseModel):
    """
    Provider options derived from query parameters.
    Unset features stay ``None`` and are never sent.
    """
    language: str = "en"
    summarize: Optional[Union[Literal[True], Literal["v2"]]] = None
    topics: Optional[Literal[True]] = None
    sentiment: Optional[Literal[True]] = None
    intents: Optional[Literal[True]] = None

    def to_query_params(self) -> Dict[str, str]:
        """Serialise to provider query parameters, booleans as ``true``."""
        params = {}
        for key, value in self.model_dump(exclude_none=True).items():
            params[key] = "true" if value is True else str(value)
        return params


class ErrorDetail(BaseModel):
    type: Literal["validation_error", "processing_error"]
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class ErrorEnvelope(BaseModel):
    error: ErrorDetail


class AnalysisResponse(BaseModel):
    results: Dict[str, Any] = Field(default_factory=dict)
