"""
Shared fixtures for the validator test suite.

Provides: validator instance, HTTP test client
"""

import pytest
from fastapi.testclient import TestClient

from mermaid_validator.api import create_app
from mermaid_validator.config import ServiceConfig
from mermaid_validator.core import DiagramValidator


@pytest.fixture
def validator() -> DiagramValidator:
    return DiagramValidator()


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig()


@pytest.fixture
def client(config: ServiceConfig) -> TestClient:
    return TestClient(create_app(config))
