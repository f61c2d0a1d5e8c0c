from abc import ABC, abstractmethod
from datetime import timedelta
from typing import List


class EngagementDataSource(ABC):
    """User-activity counts the engagement calculator draws on."""

    @abstractmethod
    def get_active_sessions_last_hour(self) -> int:
        ...

    @abstractmethod
    def get_daily_active_users(self) -> int:
        ...

    @abstractmethod
    def get_users_with_actions(self, actions: List[str]) -> int:
        """Count users who performed at least one of ``actions``."""

    @abstractmethod
    def get_total_active_users(self) -> int:
        ...

    @abstractmethod
    def get_returning_users(self, window: timedelta) -> int:
        """Count users who came back within ``window``."""

    @abstractmethod
    def get_total_users(self) -> int:
        ...


class PlaceholderEngagementDataSource(EngagementDataSource):
    """Returns zero for every count until a real data source is wired in."""

    def get_active_sessions_last_hour(self) -> int:
        return 0

    def get_daily_active_users(self) -> int:
        return 0

    def get_users_with_actions(self, actions: List[str]) -> int:
        return 0

    def get_total_active_users(self) -> int:
        return 0

    def get_returning_users(self, window: timedelta) -> int:
        return 0

    def get_total_users(self) -> int:
        return 0
