"""Observability hook called by the ATS scorer at phase boundaries."""

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class AnalysisReporter(ABC):
    """Receives progress events from an analysis run.

    Implementations must not raise or mutate the values they are given;
    the report is computed the same way whether or not a reporter is attached.
    """

    @abstractmethod
    def phase(self, name: str, **details: Any) -> None:
        """Called once after each phase (extract, aggregate, grade, compose)."""


class LoggingReporter(AnalysisReporter):
    def phase(self, name: str, **details: Any) -> None:
        logger.debug("ATS analysis phase %s: %s", name, details)

