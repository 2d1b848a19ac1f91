"""
Test suite for observability middleware.

System role: Verification of request logging and correlation headers
"""

import logging
import uuid


def test_correlation_header_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_header_is_generated(client):
    response = client.get("/api/v1/health")

    assert uuid.UUID(response.headers["X-Correlation-ID"])


def test_request_is_logged_once_with_status_and_duration(client, caplog):
    with caplog.at_level(logging.INFO, logger="college_directory.observability.middleware"):
        client.get("/api/v1/colleges", params={"limit": 1})

    records = [r for r in caplog.records if r.name == "college_directory.observability.middleware"]
    assert [r.getMessage() for r in records] == ["GET /api/v1/colleges - 200"]
    assert records[0].levelno == logging.INFO
    assert records[0].status_code == 200
    assert records[0].query_string == "limit=1"
    assert records[0].duration_ms >= 0


def test_client_errors_are_logged_as_warnings(client, caplog):
    with caplog.at_level(logging.INFO, logger="college_directory.observability.middleware"):
        client.get("/api/v1/colleges/99")

    record = next(r for r in caplog.records if r.getMessage() == "GET /api/v1/colleges/99 - 404")
    assert record.levelno == logging.WARNING
