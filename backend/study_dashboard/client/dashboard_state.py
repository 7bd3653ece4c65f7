"""
dashboard_state.py
- Purpose: What the dashboard currently shows, plus lookup sequencing.
- Design: Each lookup takes a sequence number; a response older than the
  newest one already applied is dropped, so a slow early request can never
  overwrite a later result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from study_dashboard.client.api_client import StudyStatusClient
from study_dashboard.client.navigation import path_for_token, token_from_path
from study_dashboard.schemas.study_status import DashboardView

logger = logging.getLogger("study_dashboard.client.state")


@dataclass
class DashboardState:
    view: DashboardView | None = None
    error: str | None = None  # banner text
    path: str = "/"
    _issued: int = field(default=0, repr=False)
    _applied: int = field(default=0, repr=False)

    @property
    def loading(self) -> bool:
        return self._applied < self._issued

    def begin_lookup(self) -> int:
        self._issued += 1
        return self._issued

    def _accept(self, seq: int) -> bool:
        if seq <= self._applied:
            logger.info("dashboard.stale_response_dropped", extra={"seq": seq, "applied": self._applied})
            return False
        self._applied = seq
        return True

    def apply_result(self, seq: int, view: DashboardView) -> bool:
        if not self._accept(seq):
            return False
        self.view = view
        self.error = view.error
        return True

    def apply_error(self, seq: int, error: Exception | str) -> bool:
        if not self._accept(seq):
            return False
        self.error = str(error) or "An error occurred"
        return True

    def search(self, client: StudyStatusClient, token: str) -> bool:
        """Submit the search form: push /token/<token> and look it up."""
        self.path = path_for_token(token)
        return self.run_lookup(client, token)

    def load(self, client: StudyStatusClient, path: str) -> bool:
        """Initial page load; a /token/<token> path triggers the same lookup."""
        self.path = path
        token = token_from_path(path)
        if token is None:
            return False
        return self.run_lookup(client, token)

    def run_lookup(self, client: StudyStatusClient, token: str) -> bool:
        seq = self.begin_lookup()
        try:
            view = client.lookup(token)
        except Exception as e:
            logger.warning("dashboard.lookup_failed", extra={"error": str(e)})
            return self.apply_error(seq, e)
        return self.apply_result(seq, view)
