"""
Services module for the Text Intelligence backend.
"""
from .text_intelligence_service import TextIntelligenceService, RemoteOutcome, OutcomeStatus

__all__ = [
    'TextIntelligenceService',
    'RemoteOutcome',
    'OutcomeStatus'
]
