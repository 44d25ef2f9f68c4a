"""
Runtime configuration for the upstream owners source.

Values come from Lambda environment variables with local-development
defaults that match a Petclinic gateway running on port 8080.
"""

from dataclasses import dataclass, field
import os
from typing import List, Tuple

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_OWNER_PATHS: Tuple[str, ...] = (
    "/api/customer/owners",
    "/api/gateway/owners",
    "/api/owners",
)
DEFAULT_DETAIL_PATH = "/api/customer/owners"


@dataclass
class SourceSettings:
    """Where and how to reach the upstream owners API."""

    environment: str = "dev"
    base_url: str = DEFAULT_BASE_URL
    owner_paths: Tuple[str, ...] = field(default=DEFAULT_OWNER_PATHS)
    detail_path: str = DEFAULT_DETAIL_PATH
    timeout_seconds: float = 10.0

    @property
    def owner_candidates(self) -> List[str]:
        """Candidate list URLs, in the order they must be tried."""
        return [self._join(path) for path in self.owner_paths]

    def owner_detail_url(self, owner_id) -> str:
        return f"{self._join(self.detail_path)}/{owner_id}"

    def _join(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    @classmethod
    def from_environment(cls) -> "SourceSettings":
        """Load settings from environment variables."""
        paths_env = os.environ.get("OWNER_ENDPOINT_PATHS", "")
        paths = tuple(p.strip() for p in paths_env.split(",") if p.strip())

        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            base_url=os.environ.get("PETCLINIC_BASE_URL", DEFAULT_BASE_URL),
            owner_paths=paths or DEFAULT_OWNER_PATHS,
            detail_path=os.environ.get("OWNER_DETAIL_PATH", DEFAULT_DETAIL_PATH),
            timeout_seconds=float(os.environ.get("UPSTREAM_TIMEOUT_SECONDS", "10")),
        )
