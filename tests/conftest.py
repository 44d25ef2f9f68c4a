"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import main` to work
when running tests, simulating the Lambda environment where code
is deployed from the src/ directory.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Lambda environment variables used by handlers and services
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("PETCLINIC_BASE_URL", "http://petclinic.test")
os.environ.setdefault("UPSTREAM_TIMEOUT_SECONDS", "2")


def make_response(status_code: int = 200, payload=None, reason: str = "OK"):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


def make_session(routes: dict):
    """
    Session whose GET answers from ``routes``.

    Values are either a response built with make_response or an exception
    instance to raise. Unknown URLs raise ConnectionError.
    """
    session = MagicMock()

    def _get(url, **kwargs):
        outcome = routes.get(url)
        if outcome is None:
            raise requests.ConnectionError(f"no route for {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    session.get.side_effect = _get
    return session


@pytest.fixture
def owner_payload():
    """Two owners in the upstream camelCase format."""
    return [
        {
            "id": 1,
            "firstName": "George",
            "lastName": "Franklin",
            "address": "110 W. Liberty St.",
            "city": "Madison",
            "telephone": "6085551023",
            "pets": [
                {
                    "id": 1,
                    "name": "Leo",
                    "birthDate": "2010-09-07",
                    "type": {"id": 1, "name": "cat"},
                    "visits": [],
                }
            ],
        },
        {
            "id": 2,
            "firstName": "Betty",
            "lastName": "Davis",
            "address": "638 Cardinal Ave.",
            "city": "Sun Prairie",
            "telephone": "6085551749",
            "pets": [],
        },
    ]


@pytest.fixture
def settings():
    from utils.config import SourceSettings

    return SourceSettings(base_url="http://petclinic.test", timeout_seconds=2)
