"""
Pytest fixtures for pwstrength tests.
"""

import pytest

from pwstrength.analyzer import PasswordAnalyzer
from pwstrength.app import create_app


@pytest.fixture
def analyzer():
    return PasswordAnalyzer()


@pytest.fixture
def app():
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()
