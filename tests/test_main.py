"""Tests for the URL shortener HTTP endpoints."""

import logging

import pytest

from linkshort.core.config import Settings
from linkshort.main import create_app


class TestHealthEndpoint:
    """Tests for health check endpoint."""

    def test_health_check(self, client):
        """Test health check returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "links": 0}


class TestShortenEndpoint:
    """Tests for POST /api/shorten endpoint."""

    def test_shorten_success(self, client):
        """Test creating a short URL successfully."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example.com"},
        )
        assert response.status_code == 201
        data = response.json()
        assert len(data["short_code"]) == 6
        assert data["short_url"] == f"http://testserver/{data['short_code']}"
        assert data["destination_url"] == "https://example.com"
        assert data["expires_at"].startswith("2026-01-01T12:30:00")

    def test_shorten_with_custom_code_and_validity(self, client):
        """Test creating a short URL with custom code."""
        response = client.post(
            "/api/shorten",
            json={
                "original_url": "https://example.com",
                "custom_code": "custom",
                "validity": 5,
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["short_code"] == "custom"
        assert data["short_url"] == "http://testserver/custom"
        assert data["expires_at"].startswith("2026-01-01T12:05:00")

    def test_shorten_string_validity(self, client):
        """Test that validity may arrive as text."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "validity": "nonsense"},
        )
        assert response.status_code == 201
        assert response.json()["expires_at"].startswith("2026-01-01T12:30:00")

    def test_shorten_float_validity(self, client):
        """Test that a fractional validity is truncated, not rejected."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "validity": 1.5},
        )
        assert response.status_code == 201
        assert response.json()["expires_at"].startswith("2026-01-01T12:01:00")

    def test_shorten_huge_validity(self, client):
        """Test that an enormous validity is clamped instead of failing."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "validity": "100000000000"},
        )
        assert response.status_code == 201
        assert response.json()["expires_at"].startswith("9999-12-31T23:59:59")

    @pytest.mark.parametrize("code", ["health", "stats", "docs", "redoc"])
    def test_shorten_reserved_custom_code(self, client, code):
        """Test that codes shadowed by fixed routes are refused."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "custom_code": code},
        )
        assert response.status_code == 400
        assert response.json() == {
            "detail": "Custom shortcode is reserved",
            "error_code": "invalid_shortcode",
        }
        assert client.get("/health").json() == {"status": "healthy", "links": 0}

    def test_shorten_invalid_url(self, client):
        """Test creating with invalid URL format."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "ftp://bad"},
        )
        assert response.status_code == 400
        assert response.json() == {
            "detail": "URL must start with http:// or https://",
            "error_code": "invalid_url",
        }
        assert client.get("/api/links").json() == []

    def test_shorten_invalid_custom_code(self, client):
        """Test creating with invalid custom code characters."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "custom_code": "no@good"},
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "invalid_shortcode"

    def test_shorten_duplicate_custom_code(self, client):
        """Test creating with duplicate custom code."""
        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "custom_code": "duplicate"},
        )
        assert response.status_code == 201

        response = client.post(
            "/api/shorten",
            json={"original_url": "https://example2.com", "custom_code": "duplicate"},
        )
        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_shorten_missing_url(self, client):
        """Test that the long URL is required."""
        response = client.post("/api/shorten", json={})
        assert response.status_code == 422


class TestListLinksEndpoint:
    """Tests for GET /api/links endpoint."""

    def test_list_empty(self, client):
        response = client.get("/api/links")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_with_data(self, client, clock):
        """Test listing links with minutes left."""
        for code in ("list1", "list2", "list3"):
            client.post(
                "/api/shorten",
                json={"original_url": f"https://{code}.com", "custom_code": code},
            )
        clock.advance(minutes=5)

        response = client.get("/api/links")
        assert response.status_code == 200
        data = {item["short_code"]: item for item in response.json()}
        assert set(data) == {"list1", "list2", "list3"}
        assert data["list1"]["remaining_minutes"] == 25
        assert data["list1"]["short_url"] == "http://testserver/list1"
        assert data["list2"]["destination_url"] == "https://list2.com"


class TestResolveEndpoint:
    """Tests for GET /api/links/{short_code} endpoint."""

    def test_resolve_live(self, client):
        client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "custom_code": "live1"},
        )
        response = client.get("/api/links/live1")
        assert response.status_code == 200
        assert response.json() == {
            "short_code": "live1",
            "state": "redirecting",
            "destination_url": "https://example.com",
            "redirect_delay_ms": 1000,
        }

    def test_resolve_not_found(self, client):
        response = client.get("/api/links/nonexistent")
        assert response.status_code == 404
        assert response.json()["state"] == "not_found"

    def test_resolve_expired_then_not_found(self, client, clock):
        client.post(
            "/api/shorten",
            json={"original_url": "https://a.com", "custom_code": "mycode", "validity": 1},
        )
        clock.advance(seconds=120)

        response = client.get("/api/links/mycode")
        assert response.status_code == 410
        assert response.json()["state"] == "expired"

        response = client.get("/api/links/mycode")
        assert response.status_code == 404


class TestHomePage:
    """Tests for the shortening form."""

    def test_form_rendered(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert 'name="original_url"' in response.text
        assert 'name="custom_code"' in response.text
        assert 'name="validity"' in response.text

    def test_form_submit_success(self, client):
        response = client.post(
            "/",
            data={"original_url": "https://example.com", "custom_code": "webcode", "validity": ""},
        )
        assert response.status_code == 201
        assert "Shortened URL:" in response.text
        assert 'href="http://testserver/webcode"' in response.text

    def test_form_submit_generated_code(self, client):
        response = client.post("/", data={"original_url": "https://example.com"})
        assert response.status_code == 201
        links = client.get("/api/links").json()
        assert len(links) == 1
        assert len(links[0]["short_code"]) == 6
        assert links[0]["short_url"] in response.text

    @pytest.mark.parametrize(
        "form, status, message",
        [
            (
                {"original_url": "ftp://bad"},
                400,
                "URL must start with http:// or https://",
            ),
            (
                {"original_url": "https://example.com", "custom_code": "ab"},
                400,
                "Custom shortcode must be 4-20 chars alphanumeric/_/-",
            ),
        ],
    )
    def test_form_submit_errors(self, client, form, status, message):
        response = client.post("/", data=form)
        assert response.status_code == status
        assert message in response.text
        assert "Shortened URL:" not in response.text
        assert client.get("/api/links").json() == []

    def test_form_submit_huge_validity(self, client):
        response = client.post(
            "/",
            data={
                "original_url": "https://example.com",
                "custom_code": "longlife",
                "validity": "100000000000",
            },
        )
        assert response.status_code == 201
        assert 'href="http://testserver/longlife"' in response.text

    def test_form_submit_reserved_code(self, client):
        response = client.post(
            "/", data={"original_url": "https://example.com", "custom_code": "health"}
        )
        assert response.status_code == 400
        assert "Custom shortcode is reserved" in response.text

    def test_form_submit_duplicate(self, client):
        form = {"original_url": "https://example.com", "custom_code": "twice"}
        client.post("/", data=form)

        response = client.post("/", data=form)
        assert response.status_code == 409
        assert "Custom shortcode already exists" in response.text

    def test_form_keeps_entered_values_on_error(self, client):
        response = client.post(
            "/", data={"original_url": "example.com", "validity": "15"}
        )
        assert 'value="example.com"' in response.text
        assert 'value="15"' in response.text


class TestStatsPage:
    """Tests for the listing page."""

    def test_empty_state(self, client):
        response = client.get("/stats")
        assert response.status_code == 200
        assert "No URLs shortened yet." in response.text
        assert "<table" not in response.text

    def test_table(self, client, clock):
        client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "custom_code": "stat1"},
        )
        client.post(
            "/api/shorten",
            json={"original_url": "https://old.com", "custom_code": "stat2", "validity": 1},
        )
        clock.advance(minutes=2)

        response = client.get("/stats")
        assert response.status_code == 200
        assert "<table" in response.text
        assert "stat1" in response.text
        assert "28 min" in response.text
        # expired links stay listed until someone visits them
        assert "stat2" in response.text
        assert "0 min" in response.text


class TestRedirectPage:
    """Tests for GET /{short_code}."""

    def test_redirecting(self, client):
        client.post(
            "/api/shorten",
            json={"original_url": "https://example.com", "custom_code": "go1234"},
        )
        response = client.get("/go1234", follow_redirects=False)
        assert response.status_code == 200
        assert "Redirecting..." in response.text
        assert 'http-equiv="refresh"' in response.text
        assert 'content="1;url=https://example.com"' in response.text
        assert "Go back home" not in response.text

    def test_not_found(self, client):
        response = client.get("/nonexistent", follow_redirects=False)
        assert response.status_code == 404
        assert "Short URL not found." in response.text
        assert "Go back home" in response.text
        assert 'http-equiv="refresh"' not in response.text

    def test_expired_then_not_found(self, client, clock):
        client.post(
            "/api/shorten",
            json={"original_url": "https://a.com", "custom_code": "mycode", "validity": 1},
        )
        clock.advance(milliseconds=120_000)

        response = client.get("/mycode")
        assert response.status_code == 410
        assert "This link has expired." in response.text
        assert 'http-equiv="refresh"' not in response.text

        response = client.get("/mycode")
        assert response.status_code == 404
        assert client.get("/health").json()["links"] == 0

    def test_stats_and_health_not_treated_as_codes(self, client):
        assert "URL Analytics" in client.get("/stats").text
        assert client.get("/health").json()["status"] == "healthy"


class TestAppFactory:
    """Tests for create_app wiring."""

    def test_log_level_follows_settings(self, clock):
        create_app(settings=Settings(_env_file=None, log_level="DEBUG"), clock=clock)
        assert logging.getLogger("linkshort").level == logging.DEBUG

        create_app(settings=Settings(_env_file=None, log_level="WARNING"), clock=clock)
        assert logging.getLogger("linkshort").level == logging.WARNING

    def test_fixed_routes_are_reserved(self, app):
        reserved = app.state.service.reserved_codes
        assert {"health", "stats", "docs", "redoc"} <= reserved
        assert "api" not in reserved
