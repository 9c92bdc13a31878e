"""
Pytest configuration and shared fixtures.
"""

import io

import pytest

from app import create_app
from models import db, EMPLOYER, JOB_SEEKER


@pytest.fixture(scope="session")
def app(tmp_path_factory):
    base = tmp_path_factory.mktemp("job_board")
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{base / 'test.db'}",
        "UPLOAD_FOLDER": str(base / "uploads"),
        "LOG_LEVEL": "WARNING",
    })
    return app


@pytest.fixture(autouse=True)
def fresh_database(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()
        db.create_all()
    yield
    with app.app_context():
        db.session.remove()


@pytest.fixture
def storage(app):
    return app.extensions["job_board_storage"]


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, username, role, password="secret123", **extra):
    payload = {
        "username": username,
        "password": password,
        "email": f"{username}@example.com",
        "role": role,
    }
    payload.update(extra)
    response = client.post("/api/register", json=payload)
    assert response.status_code == 201, response.get_data(as_text=True)
    return response.get_json()


@pytest.fixture
def employer_client(app):
    client = app.test_client()
    client.user = register(client, "acme_hr", EMPLOYER, companyName="Acme")
    return client


@pytest.fixture
def other_employer_client(app):
    client = app.test_client()
    client.user = register(client, "globex_hr", EMPLOYER, companyName="Globex")
    return client


@pytest.fixture
def seeker_client(app):
    client = app.test_client()
    client.user = register(client, "jane", JOB_SEEKER)
    return client


@pytest.fixture
def other_seeker_client(app):
    client = app.test_client()
    client.user = register(client, "john", JOB_SEEKER)
    return client


@pytest.fixture
def job_payload():
    return {
        "title": "Backend Engineer",
        "description": "Build and run the API.",
        "company": "Acme",
        "location": "Remote",
        "salary": "100k",
    }


def post_job(client, payload):
    response = client.post("/api/jobs", json=payload)
    assert response.status_code == 201, response.get_data(as_text=True)
    return response.get_json()


def apply(client, job_id, filename="r.pdf", cover_letter=None):
    data = {"resume": (io.BytesIO(b"%PDF-1.4 resume"), filename)}
    if cover_letter is not None:
        data["coverLetter"] = cover_letter
    return client.post(f"/api/jobs/{job_id}/apply", data=data, content_type="multipart/form-data")
