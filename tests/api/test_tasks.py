"""API tests for the task endpoints (in-memory store, real app wiring)."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient

OWNER_ID = "owner-alice"


def _future(days: int = 3) -> str:
    return (datetime.now(UTC) + timedelta(days=days)).isoformat()


def _payload(**overrides) -> dict:
    body = {
        "items": ["Draft budget", "Review slides"],
        "expectedDeliveryDate": _future(),
        "assignedBy": "Alice Smith",
        "priority": "high",
    }
    body.update(overrides)
    return body


async def _create(client: AsyncClient, headers: dict, **overrides) -> dict:
    response = await client.post("/api/v1/tasks", json=_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_task_returns_camel_case_record(
    client: AsyncClient, auth_headers: dict
) -> None:
    task = await _create(client, auth_headers, notes="  first  ")
    assert task["ownerId"] == OWNER_ID
    assert task["items"] == ["Draft budget", "Review slides"]
    assert task["assignedBy"] == "Alice Smith"
    assert task["status"] == "pending"
    assert task["priority"] == "high"
    assert task["notes"] == "first"
    assert task["deliveredOn"] is None
    assert task["id"] and task["createdAt"]


async def test_create_requires_bearer_token(client: AsyncClient) -> None:
    response = await client.post("/api/v1/tasks", json=_payload())
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_invalid_token_is_rejected(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/tasks", headers={"Authorization": "Bearer nope"}
    )
    assert response.status_code == 401


async def test_create_reports_every_invalid_field(
    client: AsyncClient, auth_headers: dict
) -> None:
    response = await client.post(
        "/api/v1/tasks",
        json={"items": [], "priority": "asap"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    fields = [e["field"] for e in body["details"]["errors"]]
    assert fields == ["items", "expected_delivery_date", "assigned_by", "priority"]


async def test_create_with_past_deadline_is_rejected(
    client: AsyncClient, auth_headers: dict
) -> None:
    response = await client.post(
        "/api/v1/tasks",
        json=_payload(expectedDeliveryDate=_future(days=-2)),
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["details"]["errors"][0]["field"] == "expected_delivery_date"


async def test_list_paginates_newest_first(
    client: AsyncClient, auth_headers: dict
) -> None:
    for i in range(12):
        await _create(client, auth_headers, items=[f"Task {i}"])

    first = (await client.get("/api/v1/tasks?limit=5", headers=auth_headers)).json()
    last = (await client.get("/api/v1/tasks?limit=5&page=3", headers=auth_headers)).json()

    assert [t["items"][0] for t in first["tasks"]] == [f"Task {i}" for i in (11, 10, 9, 8, 7)]
    assert first["pagination"] == {
        "currentPage": 1,
        "totalPages": 3,
        "totalMatching": 12,
        "hasNextPage": True,
        "hasPrevPage": False,
    }
    assert len(last["tasks"]) == 2
    assert last["pagination"]["hasNextPage"] is False


async def test_list_filters_and_search(client: AsyncClient, auth_headers: dict) -> None:
    await _create(client, auth_headers, assignedBy="Alice Smith", priority="low")
    await _create(client, auth_headers, assignedBy="Carol", priority="urgent")
    await _create(client, auth_headers, assignedBy="Dave", items=["Call ALICE"])

    by_priority = await client.get(
        "/api/v1/tasks", params={"priority": "urgent"}, headers=auth_headers
    )
    by_search = await client.get(
        "/api/v1/tasks", params={"search": "alice", "status": "all"}, headers=auth_headers
    )
    today = await client.get(
        "/api/v1/tasks", params={"dateFilter": "today"}, headers=auth_headers
    )

    assert [t["assignedBy"] for t in by_priority.json()["tasks"]] == ["Carol"]
    assert sorted(t["assignedBy"] for t in by_search.json()["tasks"]) == [
        "Alice Smith",
        "Dave",
    ]
    assert today.json()["pagination"]["totalMatching"] == 3


async def test_list_is_scoped_to_owner(
    client: AsyncClient, auth_headers: dict, other_auth_headers: dict
) -> None:
    await _create(client, auth_headers)
    response = await client.get("/api/v1/tasks", headers=other_auth_headers)
    assert response.json()["tasks"] == []


async def test_other_owner_gets_not_found(
    client: AsyncClient, auth_headers: dict, other_auth_headers: dict
) -> None:
    task = await _create(client, auth_headers)
    url = f"/api/v1/tasks/{task['id']}"

    assert (await client.get(url, headers=other_auth_headers)).status_code == 404
    assert (
        await client.put(url, json={"notes": "mine"}, headers=other_auth_headers)
    ).status_code == 404
    assert (await client.delete(url, headers=other_auth_headers)).status_code == 404
    assert (await client.get(url, headers=auth_headers)).json()["notes"] == ""


async def test_update_completion_sets_and_clears_delivered_on(
    client: AsyncClient, auth_headers: dict
) -> None:
    task = await _create(client, auth_headers)
    url = f"/api/v1/tasks/{task['id']}"

    completed = await client.put(url, json={"status": "completed"}, headers=auth_headers)
    assert completed.status_code == 200
    assert completed.json()["status"] == "completed"
    assert completed.json()["deliveredOn"] is not None

    reopened = await client.put(url, json={"status": "in-progress"}, headers=auth_headers)
    assert reopened.json()["status"] == "in-progress"
    assert reopened.json()["deliveredOn"] is None


async def test_update_rejects_owner_change(client: AsyncClient, auth_headers: dict) -> None:
    task = await _create(client, auth_headers)
    response = await client.put(
        f"/api/v1/tasks/{task['id']}",
        json={"ownerId": "someone-else"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["details"]["errors"][0]["field"] == "owner_id"


async def test_delete_then_get_is_not_found(client: AsyncClient, auth_headers: dict) -> None:
    task = await _create(client, auth_headers)
    url = f"/api/v1/tasks/{task['id']}"

    deleted = await client.delete(url, headers=auth_headers)
    assert deleted.status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404


async def test_stats_counts_by_status(client: AsyncClient, auth_headers: dict) -> None:
    await _create(client, auth_headers)
    await _create(client, auth_headers, status="in-progress")
    await _create(client, auth_headers, status="completed")

    response = await client.get("/api/v1/tasks/stats", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "total": 3,
        "overdue": 0,
        "pending": 1,
        "in-progress": 1,
        "completed": 1,
        "cancelled": 0,
        "storedOverdue": 0,
    }


async def test_export_returns_all_rows(client: AsyncClient, auth_headers: dict) -> None:
    for _ in range(12):
        await _create(client, auth_headers)

    response = await client.get(
        "/api/v1/export/tasks", params={"limit": 5, "priority": "high"}, headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["totalRecords"] == 12
    assert body["columns"][0] == "S.No"
    assert body["rows"][0]["Tasks"] == "Draft budget; Review slides"
    assert body["rows"][0]["Delivered On"] == "Not Delivered"
    assert body["filters"] == {"priority": "high"}


async def test_delivered_on_follows_status(client: AsyncClient, auth_headers: dict) -> None:
    pending = await _create(client, auth_headers, deliveredOn=_future(days=1))
    assert pending["status"] == "pending"
    assert pending["deliveredOn"] is None

    url = f"/api/v1/tasks/{pending['id']}"
    await client.put(url, json={"status": "completed"}, headers=auth_headers)
    cleared = await client.put(url, json={"deliveredOn": None}, headers=auth_headers)

    assert cleared.status_code == 200
    assert cleared.json()["status"] == "completed"
    assert cleared.json()["deliveredOn"] is not None


async def test_page_far_past_the_end_is_empty(client: AsyncClient, auth_headers: dict) -> None:
    await _create(client, auth_headers)
    response = await client.get(
        "/api/v1/tasks",
        params={"page": 10**19, "limit": 10**6},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["tasks"] == []
    assert response.json()["pagination"]["totalMatching"] == 1
