"""
Tests for application submission, listing and the duplicate check.
"""

import pytest
from jobboard.core.exceptions import ConflictError, NotFoundError
from jobboard.crud import application as application_crud
from jobboard.models.application import Application
from jobboard.services import application_service


class TestSubmitApplication:
    """POST /api/applications"""

    def test_submit_success(self, client, make_job, sample_application_data):
        job = make_job()

        response = client.post("/api/applications", json={**sample_application_data, "jobId": job.id})

        assert response.status_code == 200
        data = response.json()
        assert data["jobId"] == job.id
        assert data["applicantEmail"] == "jane@example.com"
        assert data["resumeUrl"] == "https://cv.example/jane.pdf"
        assert data["createdAt"] is not None

    def test_submit_unknown_job(self, client, db_session, sample_application_data):
        response = client.post("/api/applications", json={**sample_application_data, "jobId": 99999})

        assert response.status_code == 404
        assert response.json()["kind"] == "NOT_FOUND"
        assert db_session.query(Application).count() == 0

    def test_submit_twice_conflicts(self, client, make_job, sample_application_data):
        job = make_job()
        body = {**sample_application_data, "jobId": job.id}

        assert client.post("/api/applications", json=body).status_code == 200
        response = client.post("/api/applications", json=body)

        assert response.status_code == 409
        assert response.json()["detail"] == "You have already applied for this job"

    def test_same_email_can_apply_to_other_jobs(self, client, make_job, sample_application_data):
        first, second = make_job(title="A"), make_job(title="B")

        for job in (first, second):
            response = client.post("/api/applications", json={**sample_application_data, "jobId": job.id})
            assert response.status_code == 200

    def test_submit_invalid_email(self, client, make_job, sample_application_data):
        job = make_job()

        response = client.post("/api/applications", json={
            **sample_application_data, "jobId": job.id, "applicantEmail": "not-an-email"
        })

        assert response.status_code == 400

    def test_submit_missing_job_id(self, client, sample_application_data):
        response = client.post("/api/applications", json=sample_application_data)

        assert response.status_code == 400


class TestListAndCheck:

    def test_list_for_job_newest_first(self, client, make_job):
        job = make_job()
        for name in ("first", "second", "third"):
            client.post("/api/applications", json={
                "jobId": job.id, "applicantName": name, "applicantEmail": f"{name}@example.com"
            })

        response = client.get(f"/api/applications/job/{job.id}")

        assert response.status_code == 200
        assert [a["applicantName"] for a in response.json()] == ["third", "second", "first"]

    def test_list_for_unknown_job_is_empty(self, client):
        response = client.get("/api/applications/job/99999")

        assert response.status_code == 200
        assert response.json() == []

    def test_check_has_applied(self, client, make_job, sample_application_data):
        job = make_job()
        params = {"jobId": job.id, "email": "jane@example.com"}

        assert client.get("/api/applications/check", params=params).json() == {"hasApplied": False}

        client.post("/api/applications", json={**sample_application_data, "jobId": job.id})

        assert client.get("/api/applications/check", params=params).json() == {"hasApplied": True}

    def test_check_matches_mixed_case_domain(self, client, make_job, sample_application_data):
        job = make_job()
        body = {**sample_application_data, "jobId": job.id, "applicantEmail": "Jane@Example.COM"}

        response = client.post("/api/applications", json=body)
        assert response.status_code == 200
        assert response.json()["applicantEmail"] == "Jane@example.com"

        params = {"jobId": job.id, "email": "Jane@Example.COM"}
        assert client.get("/api/applications/check", params=params).json() == {"hasApplied": True}
        assert client.post("/api/applications", json=body).status_code == 409

    def test_check_requires_params(self, client):
        response = client.get("/api/applications/check", params={"email": "jane@example.com"})

        assert response.status_code == 400


class TestApplicationService:

    def test_second_submission_raises_conflict(self, db_session, make_job):
        job = make_job()
        application_service.submit(db_session, job.id, "Jane", "jane@example.com", None, None)

        assert application_service.has_applied(db_session, job.id, "jane@example.com") is True
        with pytest.raises(ConflictError):
            application_service.submit(db_session, job.id, "Jane", "jane@example.com", None, None)

    def test_email_domain_case_is_ignored(self, db_session, make_job):
        job = make_job()
        application_service.submit(db_session, job.id, "Jane", "Jane@Example.COM", None, None)

        assert application_service.has_applied(db_session, job.id, "Jane@Example.COM") is True
        assert application_service.has_applied(db_session, job.id, "Jane@example.com") is True
        with pytest.raises(ConflictError):
            application_service.submit(db_session, job.id, "Jane", "Jane@EXAMPLE.com", None, None)

    def test_unknown_job_raises_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            application_service.submit(db_session, 424242, "Jane", "jane@example.com", None, None)

    def test_racing_duplicate_hits_unique_constraint(self, db_session, make_job, monkeypatch):
        """A duplicate that slips past the existence check is still a conflict."""
        job = make_job()
        application_service.submit(db_session, job.id, "Jane", "jane@example.com", None, None)
        monkeypatch.setattr(application_crud, "exists_by_job_and_email", lambda db, job_id, email: False)

        with pytest.raises(ConflictError):
            application_service.submit(db_session, job.id, "Jane", "jane@example.com", None, None)

        assert db_session.query(Application).count() == 1

    def test_deleting_job_removes_its_applications(self, db_session, make_job):
        from jobboard.services import job_service

        job = make_job()
        application_service.submit(db_session, job.id, "Jane", "jane@example.com", None, None)

        job_service.delete(db_session, job.id)

        assert db_session.query(Application).count() == 0

    def test_blank_applicant_name_is_validation_error(self, db_session, make_job):
        from jobboard.core.exceptions import ErrorKind, ValidationError

        job = make_job()

        with pytest.raises(ValidationError) as exc_info:
            application_service.submit(db_session, job.id, "  ", "jane@example.com", None, None)

        assert exc_info.value.kind == ErrorKind.VALIDATION
