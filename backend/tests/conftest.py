import pytest
from fastapi.testclient import TestClient #fake http client that calls the FastAPI routes without running a server

from timetabler.core.config import Settings, get_settings
from timetabler.main import app
from timetabler.models import Course, Room, Teacher


@pytest.fixture()
def settings():
    return Settings(_env_file=None)


@pytest.fixture()
def client(settings):
    # Pin settings so a developer's backend/.env cannot change test outcomes.
    app.dependency_overrides[get_settings] = lambda: settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def subjects():
    return [
        Course(id="c1", name="Mathematics I", code="MAT101", credits=4),
        Course(id="c2", name="Physics I", code="PHY101", credits=3),
        Course(id="c3", name="Programming Lab", code="CSE101L", credits=2, type="Lab"),
    ]


@pytest.fixture
def teachers():
    return [
        Teacher(id="t1", name="Dr. Rao", specialization=["Mathematics"]),
        Teacher(id="t2", name="Prof. Chen", specialization=["Physics"]),
        Teacher(id="t3", name="Dr. Iyer", specialization=["Programming"]),
    ]


@pytest.fixture
def rooms():
    return [
        Room(id="r1", name="Lecture Hall A", capacity=100, type="Lecture Hall"),
        Room(id="r2", name="Computer Lab 1", capacity=30, type="Computer Lab"),
    ]
