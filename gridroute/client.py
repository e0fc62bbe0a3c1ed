"""
Client for the path service.

Usage:
    from gridroute.client import PathfinderClient

    client = PathfinderClient("http://localhost:8080")
    path = client.find_path("dijkstra", (0, 0), (0, 3), obstacles=[(0, 1)])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import requests

from gridroute.config import REQUEST_TIMEOUT, SERVICE_URL, USER_AGENT
from gridroute.grid.model import Cell, CellLike, as_cell

logger = logging.getLogger(__name__)


class PathfinderClient:
    """
    Calls the /find-path-<strategy> routes of a running service.

    Sends the same JSON body the web grid UI sends.
    """

    def __init__(self, base_url: str = SERVICE_URL, timeout: float = REQUEST_TIMEOUT) -> None:
        """
        Initialize the client.

        Args:
            base_url: Service root, e.g. http://localhost:8080
            timeout: Request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})

    def find_path(
        self,
        strategy: str,
        start: CellLike,
        end: CellLike,
        obstacles: Iterable[CellLike] | None = None,
    ) -> list[Cell]:
        """
        Ask the service for a path.

        Args:
            strategy: "dfs" or "dijkstra"
            start: Start cell
            end: End cell
            obstacles: Blocked cells

        Returns:
            Path cells, empty if no route exists

        Raises:
            requests.HTTPError: On a 4xx/5xx response
        """
        body = {
            "start": as_cell(start).to_dict(),
            "end": as_cell(end).to_dict(),
            "obstacles": [as_cell(o).to_dict() for o in obstacles or ()],
        }
        url = f"{self._base_url}/find-path-{strategy}"

        resp = self._session.post(url, json=body, timeout=self._timeout)
        if not resp.ok:
            try:
                error = resp.json().get("error")
            except ValueError:
                error = resp.text
            logger.warning(f"{url} returned {resp.status_code}: {error}")
        resp.raise_for_status()

        return [Cell.from_dict(c) for c in resp.json()["path"]]

    def ping(self) -> bool:
        """Whether the service answers its liveness check."""
        try:
            resp = self._session.get(f"{self._base_url}/ping", timeout=self._timeout)
        except requests.RequestException as e:
            logger.debug(f"Ping failed: {e}")
            return False
        return resp.ok

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "PathfinderClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
