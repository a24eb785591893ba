"""
Pytest configuration and shared fixtures for Kube Pod Sentinel tests.

The Kubernetes API is replaced with a MagicMock so tests never need a
cluster or a kubeconfig.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add parent directory to path for server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def clear_kube_settings(monkeypatch):
    """
    Start every test from the built-in defaults.
    This runs automatically before each test.
    """
    monkeypatch.delenv("KUBE_NAMESPACE", raising=False)
    monkeypatch.delenv("KUBE_CONTEXT", raising=False)
    yield


@pytest.fixture
def core_api(monkeypatch):
    """Provide a mocked CoreV1Api returned by server.get_core_v1_client."""
    import server

    api = MagicMock()
    monkeypatch.setattr(server, "get_core_v1_client", lambda: api)
    return api


@pytest.fixture
def engine():
    """Provide an engine on the default rule set."""
    from pii_masking import RedactionEngine

    return RedactionEngine()
