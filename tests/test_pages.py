"""
Tests for the HTML pages and the admin login flow.

Tests:
- Public home page
- Session requirement on /jobs pages
- Detail redirect for unknown jobs
- Login/logout with CSRF tokens
- CORS restricted to the configured origin
"""

from jobboard.core.config import settings


class TestHomePage:

    def test_home_lists_recent_jobs(self, client, make_job):
        make_job(title="Platform Engineer")

        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Platform Engineer" in response.text

    def test_home_without_jobs(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "No jobs posted yet" in response.text


class TestJobPages:

    def test_jobs_page_requires_login(self, client):
        response = client.get("/jobs", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login"

    def test_job_list_with_search(self, admin_client, make_job):
        make_job(title="Python Developer")
        make_job(title="Designer")

        response = admin_client.get("/jobs", params={"q": "python"})

        assert response.status_code == 200
        assert "Python Developer" in response.text
        assert "Designer" not in response.text

    def test_job_detail(self, admin_client, make_job):
        job = make_job(title="SRE", description="Keep the lights on")

        response = admin_client.get(f"/jobs/{job.id}")

        assert response.status_code == 200
        assert "Keep the lights on" in response.text
        assert "Acme" in response.text

    def test_unknown_job_redirects_to_list(self, admin_client):
        response = admin_client.get("/jobs/99999", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/jobs"


class TestLogin:

    def test_login_sets_session_cookie(self, client, login):
        response = login(client)

        assert response.status_code == 303
        assert response.headers["location"] == "/jobs"
        assert settings.SESSION_COOKIE_NAME in response.cookies

    def test_wrong_password_redirects_back(self, client, login):
        response = login(client, password="wrong")

        assert response.status_code == 303
        assert response.headers["location"].startswith("/login?error")
        assert client.get("/jobs", follow_redirects=False).status_code == 303

    def test_login_without_csrf_token_is_forbidden(self, client):
        response = client.post(
            "/login",
            data={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
            follow_redirects=False,
        )

        assert response.status_code == 403

    def test_forged_session_cookie_is_rejected(self, client):
        client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-jwt")

        assert client.get("/jobs", follow_redirects=False).status_code == 303

    def test_logout_clears_session(self, admin_client):
        csrf_token = admin_client.cookies.get(settings.CSRF_COOKIE_NAME)

        response = admin_client.post("/logout", data={"csrf_token": csrf_token}, follow_redirects=False)

        assert response.status_code == 303
        assert admin_client.get("/jobs", follow_redirects=False).status_code == 303

    def test_api_needs_no_session_or_csrf(self, client, company):
        response = client.post("/api/companies", json={"name": "NoAuth Inc"})

        assert response.status_code == 200


class TestCors:

    def test_allowed_origin(self, client):
        response = client.get("/api/jobs", headers={"Origin": "http://localhost:3000"})

        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_other_origin_gets_no_cors_header(self, client):
        response = client.get("/api/jobs", headers={"Origin": "http://evil.example"})

        assert "access-control-allow-origin" not in response.headers
