"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient
from nacl.signing import SigningKey

from gorkbot.app import app


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(scope="session")
def signing_key() -> SigningKey:
    """A throwaway Ed25519 keypair standing in for Discord's."""
    return SigningKey.generate()


@pytest.fixture(scope="session")
def public_key_hex(signing_key: SigningKey) -> str:
    """Hex-encoded public half of ``signing_key``, as it would appear in config."""
    return signing_key.verify_key.encode().hex()
