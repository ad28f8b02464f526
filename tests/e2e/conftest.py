"""Fixtures for end-to-end HTTP tests."""

import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from engage.interface.api.app import create_app
from engage.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by the in-memory test container."""
    app_instance = create_app()
    test_container = build_test_container(set(), FastapiProvider())
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def post_comment(client: TestClient, text: str = "Great episode!", **overrides) -> dict:
    """Post a comment and return the created item."""
    body = {
        "anime_id": 1,
        "episode_id": 101,
        "user_name": "alice",
        "user_avatar": "icon_02",
        "text": text,
        **overrides,
    }
    response = client.post("/api/comments", json=body)
    assert response.status_code == 201, response.text
    return response.json()
