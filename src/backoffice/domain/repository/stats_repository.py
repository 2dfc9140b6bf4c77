"""Abstract repository for dashboard aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.dashboard import DashboardStats


class StatsRepository(ABC):

    @abstractmethod
    def dashboard_stats(self) -> DashboardStats:
        """Compute the dashboard figures as of now. Zeros on empty data."""
