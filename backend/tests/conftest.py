"""
Test configuration and fixtures for the engagement analyzer backend tests.
"""

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("SUGGESTION_RULE_SET", "minimal")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from engagement.main import app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def launch_post() -> str:
    return "Great news! Follow us and check out our new #launch. #excited"


@pytest.fixture
def long_positive_post() -> str:
    """A 50+ word upbeat post with CTAs and hashtags."""
    body = (
        "We are thrilled to share our amazing new product with the whole community today. "
        "After months of work the team built something great that makes planning a trip "
        "simple and fun for every traveler. Follow our page, share this post with friends, "
        "and comment below with the destination you want to visit next summer. "
        "Early feedback has been awesome and we cannot wait to hear from you. "
    )
    return body + "#travel #launch"
