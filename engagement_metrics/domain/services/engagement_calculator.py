"""Engagement Calculator - ratio formulas over user-activity counts"""
import logging
from datetime import timedelta
from typing import Optional, Union
from engagement_metrics.domain.entities.engagement import ENGAGEMENT_ACTIONS, EngagementMethod
from engagement_metrics.infrastructure.engagement.data_source import (
    EngagementDataSource,
    PlaceholderEngagementDataSource,
)

logger = logging.getLogger(__name__)

RETENTION_WINDOW = timedelta(days=7)


def _percentage(part: int, whole: int) -> float:
    # No population means no engagement to report
    if not whole:
        return 0.0
    return (float(part) / float(whole)) * 100


class EngagementCalculator:
    def __init__(self, data_source: Optional[EngagementDataSource] = None):
        self.data_source = data_source or PlaceholderEngagementDataSource()

    def calculate(self, method: Union[EngagementMethod, str]) -> float:
        """Compute an engagement rate in percent.

        Args:
            method: session_based, activity_based or retention_based

        Returns:
            The rate, or 0.0 for an unknown method.
        """
        try:
            method = EngagementMethod(method)
        except ValueError:
            logger.warning(f"⚠️ Unknown engagement method: {method}")
            return 0.0

        if method is EngagementMethod.SESSION_BASED:
            # Users with sessions in last hour vs total daily active users
            return _percentage(
                self.data_source.get_active_sessions_last_hour(),
                self.data_source.get_daily_active_users(),
            )

        if method is EngagementMethod.ACTIVITY_BASED:
            return _percentage(
                self.data_source.get_users_with_actions(list(ENGAGEMENT_ACTIONS)),
                self.data_source.get_total_active_users(),
            )

        # Users who returned within the retention window
        return _percentage(
            self.data_source.get_returning_users(RETENTION_WINDOW),
            self.data_source.get_total_users(),
        )


def calculate_engagement(
    method: Union[EngagementMethod, str],
    data_source: Optional[EngagementDataSource] = None,
) -> float:
    return EngagementCalculator(data_source).calculate(method)
