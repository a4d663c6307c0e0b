"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import main` to work when running
tests, simulating the Lambda environment where code is deployed from the
src/ directory.
"""

import json
import os
import sys
from pathlib import Path

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing."""
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def registry():
    """Fresh, empty service registry per test."""
    from services.registry import ServiceRegistry
    from utils.settings import Settings

    registry = ServiceRegistry.create(Settings(environment="test"))
    yield registry
    registry.reset()


@pytest.fixture
def make_event():
    """Build an API Gateway HTTP API (v2) event."""

    def _make(method, path, body=None, query=None, headers=None, base64_encoded=False):
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "requestContext": {"http": {"method": method, "path": path}},
            "queryStringParameters": query,
            "headers": headers or {},
            "body": body,
            "isBase64Encoded": base64_encoded,
        }

    return _make


@pytest.fixture
def valid_ticket():
    """Minimal payload that satisfies the ticket schema."""
    return {
        "customer_id": "cust-123",
        "customer_email": "test@example.com",
        "customer_name": "Test User",
        "subject": "Need help with my account",
        "description": "Something is not quite right with my account settings.",
        "category": "other",
        "priority": "medium",
        "status": "new",
        "tags": [],
        "metadata": {"source": "web_form", "device_type": "desktop"},
    }
