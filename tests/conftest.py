"""
tests/conftest.py

Shared pytest fixtures available to all test modules.

Fixtures defined here are auto-discovered by pytest — no import needed.
"""

import io
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from custom_validation.main import app
from custom_validation.validators.file_type import UploadedFile


# ── Core client fixture ────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def client() -> TestClient:
    """
    A synchronous TestClient wrapping the FastAPI app.

    session-scoped so the app is instantiated once per test run.
    """
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


# ── Clock fixture ──────────────────────────────────────────────────────────────

@pytest.fixture
def fixed_now() -> datetime:
    """A fixed "now" so age arithmetic is deterministic."""
    return datetime(2024, 6, 15, 12, 0, 0)


# ── Sample file fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def pdf_file() -> UploadedFile:
    """A small, non-empty PDF upload."""
    return UploadedFile(length=10, content_type="application/pdf", filename="cv.pdf")


@pytest.fixture
def empty_file() -> UploadedFile:
    """A zero-length upload."""
    return UploadedFile(length=0, content_type="application/pdf", filename="empty.pdf")


@pytest.fixture
def sample_pdf_upload() -> tuple:
    """
    A (field_name, (filename, file_obj, content_type)) tuple ready for
    use with TestClient's `files=` parameter.
    """
    return ("file", ("sample.pdf", io.BytesIO(b"%PDF-1.4\n%%EOF"), "application/pdf"))


@pytest.fixture
def sample_png_upload() -> tuple:
    """A PNG upload tuple for negative-case tests."""
    return ("file", ("photo.png", io.BytesIO(b"\x89PNG\r\n\x1a\n"), "image/png"))


@pytest.fixture
def empty_pdf_upload() -> tuple:
    """A zero-byte upload tuple."""
    return ("file", ("empty.pdf", io.BytesIO(b""), "application/pdf"))
