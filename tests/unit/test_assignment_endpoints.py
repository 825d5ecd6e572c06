"""Unit tests for HTTP status mapping of assignment endpoints (no database)."""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from assignment_service.application.interfaces import AssignmentRepository
from assignment_service.application.services import AssignmentService
from assignment_service.domain.entities import Assignment
from assignment_service.domain.exceptions import (
    ConstraintViolationError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
)
from assignment_service.infrastructure.dependencies import get_assignment_service
from assignment_service.main import create_app


class FailingAssignmentRepository(AssignmentRepository):
    """Repository whose every statement fails with the given store error."""

    def __init__(self, error: StoreError):
        self._error = error

    async def get_by_id(self, assignment_id: int) -> Assignment | None:
        raise self._error

    async def get_all(self, category: str | None = None) -> list[Assignment]:
        raise self._error

    async def create(self, assignment: Assignment) -> Assignment:
        raise self._error

    async def update(
        self,
        assignment_id: int,
        *,
        title: str,
        content: str,
        category: str,
        updated_at: datetime,
    ) -> bool:
        raise self._error

    async def delete(self, assignment_id: int) -> bool:
        raise self._error


_VALID = {"title": "Essay", "content": "Write 500 words", "category": "English"}


def _client_failing_with(error: StoreError) -> AsyncClient:
    app = create_app()
    app.dependency_overrides[get_assignment_service] = lambda: AssignmentService(
        FailingAssignmentRepository(error)
    )
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "status_code", "message"),
    [
        (
            StoreConnectionError("connection refused"),
            500,
            "Server could not create assignment because of a database connection error.",
        ),
        (
            StoreTimeoutError("statement did not complete within 10.0s"),
            500,
            "Server could not create assignment because of a database connection error.",
        ),
        (
            ConstraintViolationError('null value in column "title"'),
            400,
            "Cannot insert null values into required fields.",
        ),
        (StoreError("disk I/O error"), 500, "An unexpected error occurred."),
    ],
)
async def test_create_classifies_store_errors(error, status_code, message):
    async with _client_failing_with(error) as client:
        response = await client.post("/assignments", json=_VALID)

    assert response.status_code == status_code
    assert response.json() == {"message": message, "error": error.detail}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path", "message"),
    [
        ("GET", "/assignments", "Server could not read assignment because database connection"),
        ("GET", "/assignments/1", "Server could not read assignment because database connection"),
        ("PUT", "/assignments/1", "Server could not update assignment because database connection"),
        ("DELETE", "/assignments/1", "Server could not delete assignment because database connection"),
    ],
)
async def test_store_failures_map_to_500(method, path, message):
    async with _client_failing_with(StoreConnectionError("connection reset")) as client:
        kwargs = {"json": _VALID} if method == "PUT" else {}
        response = await client.request(method, path, **kwargs)

    assert response.status_code == 500
    assert response.json() == {"message": message, "error": "connection reset"}


@pytest.mark.asyncio
async def test_validation_happens_before_store_access():
    async with _client_failing_with(StoreConnectionError("should not be reached")) as client:
        response = await client.post("/assignments", json={"title": "", "content": "x", "category": "y"})

    assert response.status_code == 400
    assert response.json() == {
        "message": "Missing required fields: title, content, and category are required."
    }


@pytest.mark.asyncio
async def test_malformed_requests_are_rejected_with_400():
    async with _client_failing_with(StoreError("should not be reached")) as client:
        bad_id = await client.get("/assignments/not-a-number")
        bad_json = await client.post(
            "/assignments", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        bad_type = await client.post("/assignments", json={"title": ["a"], "content": "x", "category": "y"})

    for response in (bad_id, bad_json, bad_type):
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request."
