"""
tests/api/test_validation_controller.py

HTTP tests for POST /validate/file and POST /validate/min-age.

Rules are evaluated for real; only the request/response contract is
asserted here — rule edge cases live in tests/validators/.
"""

from datetime import date, timedelta

from fastapi.testclient import TestClient

from custom_validation.core.config import settings


def _years_ago(years: int, extra_days: int = 0) -> str:
    return (date.today() - timedelta(days=365 * years + extra_days)).isoformat()


class TestValidateFile:
    """Tests for POST /validate/file."""

    def test_pdf_matches_default_types(self, client: TestClient, sample_pdf_upload) -> None:
        response = client.post("/validate/file", files=[sample_pdf_upload])

        assert response.status_code == 200
        assert response.json() == {"valid": True, "errors": {}}

    def test_wrong_type_reports_field_message(self, client: TestClient, sample_png_upload) -> None:
        response = client.post(
            "/validate/file",
            files=[sample_png_upload],
            data={"file_types": "PDF", "field_name": "Resume"},
        )

        body = response.json()
        assert response.status_code == 200
        assert body["valid"] is False
        assert body["errors"] == {"Resume": ["Resume should be in PDF format."]}

    def test_several_types_use_plural_message(self, client: TestClient, sample_png_upload) -> None:
        response = client.post(
            "/validate/file",
            files=[sample_png_upload],
            data={"file_types": "pdf,docx"},
        )

        assert response.json()["errors"] == {"File": ["File should be in PDF,DOCX formats."]}

    def test_allowed_type_passes(self, client: TestClient, sample_png_upload) -> None:
        response = client.post(
            "/validate/file", files=[sample_png_upload], data={"file_types": "JPEG,PNG"}
        )
        assert response.json()["valid"] is True

    def test_empty_upload_is_rejected(self, client: TestClient, empty_pdf_upload) -> None:
        response = client.post("/validate/file", files=[empty_pdf_upload])

        assert response.json()["errors"] == {"File": ["Selected file is empty."]}

    def test_missing_file_is_valid(self, client: TestClient) -> None:
        response = client.post("/validate/file", data={"file_types": "PDF"})

        assert response.status_code == 200
        assert response.json()["valid"] is True

    def test_unknown_file_type_returns_400(self, client: TestClient, sample_pdf_upload) -> None:
        response = client.post(
            "/validate/file", files=[sample_pdf_upload], data={"file_types": "PDF,EXE"}
        )

        assert response.status_code == 400
        assert "EXE" in response.json()["error"]

    def test_invalid_default_file_types_setting_returns_500(
        self, client: TestClient, sample_pdf_upload, monkeypatch
    ) -> None:
        """A bad DEFAULT_FILE_TYPES is a server misconfiguration, not a client error."""
        monkeypatch.setattr(settings, "default_file_types", "PDF,EXE")

        response = client.post("/validate/file", files=[sample_pdf_upload])

        assert response.status_code == 500
        error = response.json()["error"]
        assert "DEFAULT_FILE_TYPES" in error
        assert "EXE" in error

    def test_client_types_bypass_invalid_default(
        self, client: TestClient, sample_pdf_upload, monkeypatch
    ) -> None:
        monkeypatch.setattr(settings, "default_file_types", "EXE")

        response = client.post(
            "/validate/file", files=[sample_pdf_upload], data={"file_types": "PDF"}
        )

        assert response.status_code == 200
        assert response.json()["valid"] is True


class TestValidateMinAge:
    """Tests for POST /validate/min-age."""

    def test_adult_is_valid_with_default_requirement(self, client: TestClient) -> None:
        response = client.post("/validate/min-age", json={"date_of_birth": _years_ago(30)})

        assert response.status_code == 200
        assert response.json() == {"valid": True, "errors": {}}

    def test_minor_fails_with_default_message(self, client: TestClient) -> None:
        response = client.post("/validate/min-age", json={"date_of_birth": _years_ago(17)})

        assert response.json()["errors"] == {
            "DateOfBirth": ["Minimum age should be at least 18 years ."]
        }

    def test_explicit_requirement_and_field_name(self, client: TestClient) -> None:
        response = client.post(
            "/validate/min-age",
            json={
                "date_of_birth": _years_ago(0, extra_days=10),
                "years": 0,
                "months": 2,
                "field_name": "BirthDate",
            },
        )

        assert response.json()["errors"] == {
            "BirthDate": ["Minimum age should be at least 2 months ."]
        }

    def test_future_date_fails(self, client: TestClient) -> None:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()

        response = client.post("/validate/min-age", json={"date_of_birth": tomorrow})

        assert response.json()["errors"] == {
            "DateOfBirth": ["DateOfBirth can not be greater than today's date"]
        }

    def test_custom_error_message(self, client: TestClient) -> None:
        response = client.post(
            "/validate/min-age",
            json={"date_of_birth": _years_ago(5), "error_message": "Adults only."},
        )
        assert response.json()["errors"] == {"DateOfBirth": ["Adults only."]}

    def test_missing_date_is_valid(self, client: TestClient) -> None:
        response = client.post("/validate/min-age", json={})
        assert response.json()["valid"] is True

    def test_negative_component_is_rejected_by_schema(self, client: TestClient) -> None:
        response = client.post(
            "/validate/min-age", json={"date_of_birth": _years_ago(30), "days": -1}
        )
        assert response.status_code == 422
