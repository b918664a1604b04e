"""
Analysis request pipeline.

Validates the inbound body, derives provider options from the query string,
performs the remote call and translates the outcome into an HTTP response.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from flask import Response
from pydantic import ValidationError

from app.schemas.text_intelligence import AnalysisOptions, AnalysisRequest, SummarizeMode
from services.text_intelligence_service import OutcomeStatus, RemoteOutcome, TextIntelligenceService
from utils.response_helpers import (
    INVALID_TEXT,
    INVALID_URL,
    error_response,
    processing_error,
    results_response,
    validation_error,
)
from utils.validators import validate_analysis_input

logger = logging.getLogger(__name__)

SUMMARIZE_V1_MESSAGE = "Summarization v1 is no longer supported. Please use v2 or true."
NON_STRING_INPUT_MESSAGE = "'text' and 'url' must be strings"

# Substrings that mark a provider error as being about the submitted URL.
URL_ERROR_MARKERS = ("url", "unreachable", "invalid", "malformed")

ENABLE_ONLY_FLAGS = ("topics", "sentiment", "intents")


class UnsupportedOptionError(ValueError):
    """Raised when a query parameter asks for a retired provider feature."""


def build_analysis_options(args: Mapping[str, str]) -> AnalysisOptions:
    """
    Translate query parameters into provider options.

    ``summarize`` accepts ``true`` or ``v2``; ``v1`` rejects the request and
    any other value is ignored. The remaining features are enable-only: they
    are set when the parameter is exactly ``true`` and omitted otherwise.

    Raises:
        UnsupportedOptionError: for ``summarize=v1``
    """
    options: Dict[str, Any] = {"language": args.get("language") or "en"}

    summarize = args.get("summarize")
    if summarize == SummarizeMode.ENABLED.value:
        options["summarize"] = True
    elif summarize == SummarizeMode.V2.value:
        options["summarize"] = SummarizeMode.V2.value
    elif summarize == SummarizeMode.V1.value:
        raise UnsupportedOptionError(SUMMARIZE_V1_MESSAGE)

    for flag in ENABLE_ONLY_FLAGS:
        if args.get(flag) == "true":
            options[flag] = True

    return AnalysisOptions(**options)


def classify_remote_error(message: Optional[str], uses_url: bool) -> str:
    """Best-effort guess whether a provider error concerns the submitted URL."""
    if uses_url and message:
        lowered = message.lower()
        if any(marker in lowered for marker in URL_ERROR_MARKERS):
            return INVALID_URL
    return INVALID_TEXT


def translate_outcome(outcome: RemoteOutcome, analysis_req: AnalysisRequest) -> Tuple[Response, int]:
    """Map a provider outcome to the public response contract."""
    if outcome.status == OutcomeStatus.SUCCESS:
        return results_response(outcome.results)

    if outcome.status == OutcomeStatus.REMOTE_ERROR:
        code = classify_remote_error(outcome.error, analysis_req.uses_url)
        return processing_error(outcome.error, code)

    logger.error(f"Text intelligence call failed: {outcome.error}")
    return error_response(outcome.error, 500)


def run_analysis(
    service: TextIntelligenceService,
    body: Any,
    args: Mapping[str, str]
) -> Tuple[Response, int]:
    """
    Execute the full pipeline for one request.

    Local checks short-circuit before the provider is contacted.

    Args:
        service: Provider client
        body: Decoded JSON body
        args: Query parameters

    Returns:
        Tuple of (jsonify response, status code)
    """
    if not isinstance(body, dict):
        body = {}

    text = body.get("text")
    url = body.get("url")

    message = validate_analysis_input(text, url)
    if message:
        return validation_error(message)

    try:
        options = build_analysis_options(args)
    except UnsupportedOptionError as e:
        return validation_error(str(e))

    try:
        analysis_req = AnalysisRequest(text=text, url=url)
    except ValidationError as e:
        logger.warning(f"Validation error: {e}")
        return validation_error(NON_STRING_INPUT_MESSAGE)

    logger.info(
        f"Analyzing {'url' if analysis_req.uses_url else 'text'} "
        f"with options {options.to_query_params()}"
    )
    outcome = service.analyze(analysis_req, options)
    return translate_outcome(outcome, analysis_req)
