import sqlite3

import httpx
import pytest
from fastapi.testclient import TestClient

from core.feed import CrimeFeed, get_feed
from main import app

SCHEMA = """
CREATE TABLE Codes (
    code INTEGER PRIMARY KEY,
    incident_type TEXT
);
CREATE TABLE Neighborhoods (
    neighborhood_number INTEGER PRIMARY KEY,
    neighborhood_name TEXT
);
CREATE TABLE Incidents (
    case_number TEXT PRIMARY KEY,
    date_time DATETIME,
    code INTEGER,
    incident TEXT,
    police_grid INTEGER,
    neighborhood_number INTEGER,
    block TEXT,
    latitude REAL,
    longitude REAL
);
INSERT INTO Codes (code, incident_type) VALUES
    (110, 'Murder, Non Negligent Manslaughter'),
    (600, 'Theft');
INSERT INTO Neighborhoods (neighborhood_number, neighborhood_name) VALUES
    (1, 'Conway/Battlecreek/Highwood'),
    (2, 'Greater East Side');
"""


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "stpaul_crime.sqlite3"
    conn = sqlite3.connect(path)
    conn.executescript(SCHEMA)
    conn.close()
    monkeypatch.setenv("CRIME_DB_PATH", str(path))
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def rows(db_path):
    """Read rows straight from the database file, bypassing the API."""

    def query(sql, params=()):
        conn = sqlite3.connect(db_path)
        conn.row_factory = sqlite3.Row
        try:
            return [dict(r) for r in conn.execute(sql, params).fetchall()]
        finally:
            conn.close()

    return query


@pytest.fixture
def seed_incidents(db_path):
    def insert(incidents):
        conn = sqlite3.connect(db_path)
        try:
            conn.executemany(
                """
                INSERT INTO Incidents (case_number, date_time, code, incident, police_grid,
                                       neighborhood_number, block, latitude, longitude)
                VALUES (:case_number, :date_time, :code, :incident, :police_grid,
                        :neighborhood_number, :block, :latitude, :longitude)
                """,
                incidents,
            )
            conn.commit()
        finally:
            conn.close()

    return insert


@pytest.fixture
def use_feed():
    """Install a fake upstream feed answering with `handler(request)`."""

    def install(handler):
        feed = CrimeFeed("https://feed.test/api/crimes", transport=httpx.MockTransport(handler))
        app.dependency_overrides[get_feed] = lambda: feed
        return feed

    yield install
    app.dependency_overrides.clear()


def incident(case_number, **overrides):
    record = {
        "case_number": case_number,
        "date_time": "2022-05-31T22:53:00",
        "code": 600,
        "incident": "Theft",
        "police_grid": 87,
        "neighborhood_number": 1,
        "block": "79X 6 ST E",
    }
    record.update(overrides)
    return record
