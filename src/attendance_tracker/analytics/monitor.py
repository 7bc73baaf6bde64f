from __future__ import annotations

import logging
from typing import List, Sequence

from ..core.constants import COMPLIANCE_THRESHOLD
from ..subjects.model import Subject
from .engine import compliance_alerts

logger = logging.getLogger(__name__)


class ComplianceMonitor:
    """Store listener that recomputes compliance alerts after every mutation."""

    def __init__(self, threshold: float = COMPLIANCE_THRESHOLD):
        self._threshold = threshold
        self._alerts: List[str] = []

    @property
    def alerts(self) -> List[str]:
        return list(self._alerts)

    def __call__(self, subjects: Sequence[Subject]) -> None:
        alerts = compliance_alerts(subjects, self._threshold)
        previous = set(self._alerts)

        for alert in alerts:
            if alert not in previous:
                logger.warning("Compliance alert: %s", alert)
        cleared = previous.difference(alerts)
        if cleared:
            logger.info("Cleared %d compliance alert(s)", len(cleared))

        self._alerts = alerts
