"""Integration tests for the session log and timer endpoints."""

import pytest


def _manual(day: str, start: str, end: str, **extra) -> dict:
    return {"date": day, "start_time": start, "end_time": end, **extra}


# ---------------------------------------------------------------------------
# Manual sessions
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_log_manual_session(client, auth_headers):
    """POST /volunteers/me/sessions: duration comes from the time range."""
    response = await client.post(
        "/volunteers/me/sessions",
        json=_manual("2024-04-20", "09:00:00", "12:30:00", description="Beach cleanup"),
        headers=auth_headers,
    )

    assert response.status_code == 201, response.text
    data = response.json()
    assert data["duration_hours"] == pytest.approx(3.5)
    assert data["description"] == "Beach cleanup"
    assert data["source"] == "manual"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_manual_session_end_before_start(client, auth_headers):
    """POST /volunteers/me/sessions: 422 when end is not after start."""
    response = await client.post(
        "/volunteers/me/sessions",
        json=_manual("2024-04-20", "12:00:00", "09:00:00"),
        headers=auth_headers,
    )
    assert response.status_code == 422

    listing = await client.get("/volunteers/me/sessions", headers=auth_headers)
    assert listing.json() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_manual_session_with_offset_time(client, auth_headers):
    """POST /volunteers/me/sessions: 422 when a time carries a UTC offset."""
    response = await client.post(
        "/volunteers/me/sessions",
        json=_manual("2024-04-20", "09:00:00+02:00", "12:00:00"),
        headers=auth_headers,
    )
    assert response.status_code == 422

    listing = await client.get("/volunteers/me/sessions", headers=auth_headers)
    assert listing.json() == []


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_recent_sessions(client, auth_headers):
    """GET /volunteers/me/sessions?recent=true: newest five only."""
    for day in range(1, 8):
        resp = await client.post(
            "/volunteers/me/sessions",
            json=_manual(f"2024-04-{day:02d}", "10:00:00", "11:00:00"),
            headers=auth_headers,
        )
        assert resp.status_code == 201

    everything = await client.get("/volunteers/me/sessions", headers=auth_headers)
    recent = await client.get(
        "/volunteers/me/sessions", params={"recent": "true"}, headers=auth_headers
    )
    limited = await client.get(
        "/volunteers/me/sessions", params={"limit": 2}, headers=auth_headers
    )

    assert len(everything.json()) == 7
    assert [s["date"] for s in recent.json()] == [
        "2024-04-07",
        "2024-04-06",
        "2024-04-05",
        "2024-04-04",
        "2024-04-03",
    ]
    assert len(limited.json()) == 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_edit_and_delete_session(client, auth_headers):
    """PATCH then DELETE /volunteers/me/sessions/{id}."""
    created = await client.post(
        "/volunteers/me/sessions",
        json=_manual("2024-04-20", "09:00:00", "10:00:00"),
        headers=auth_headers,
    )
    session_id = created.json()["id"]
    assert created.json()["description"] == "Manual Entry"

    edited = await client.patch(
        f"/volunteers/me/sessions/{session_id}",
        json={"end_time": "11:15:00"},
        headers=auth_headers,
    )
    assert edited.status_code == 200, edited.text
    assert edited.json()["duration_hours"] == pytest.approx(2.25)

    deleted = await client.delete(
        f"/volunteers/me/sessions/{session_id}", headers=auth_headers
    )
    assert deleted.status_code == 204

    missing = await client.delete(
        f"/volunteers/me/sessions/{session_id}", headers=auth_headers
    )
    assert missing.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_stats(client, auth_headers):
    """GET /volunteers/me/stats: count, total and average."""
    await client.post(
        "/volunteers/me/sessions",
        json=_manual("2024-04-20", "09:00:00", "10:00:00"),
        headers=auth_headers,
    )
    await client.post(
        "/volunteers/me/sessions",
        json=_manual("2024-04-21", "09:00:00", "12:00:00"),
        headers=auth_headers,
    )

    response = await client.get("/volunteers/me/stats", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {
        "session_count": 2,
        "total_hours": 4.0,
        "average_hours_per_session": 2.0,
    }


# ---------------------------------------------------------------------------
# Timer
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_clock_in_and_out(client, auth_headers):
    """POST /volunteers/me/clock/in then /clock/out records a clock session."""
    idle = await client.get("/volunteers/me/clock", headers=auth_headers)
    assert idle.json()["is_active"] is False

    started = await client.post("/volunteers/me/clock/in", headers=auth_headers)
    assert started.status_code == 200, started.text
    assert started.json()["is_active"] is True

    again = await client.post("/volunteers/me/clock/in", headers=auth_headers)
    assert again.status_code == 409

    stopped = await client.post("/volunteers/me/clock/out", headers=auth_headers)
    assert stopped.status_code == 201, stopped.text
    session = stopped.json()
    assert session["source"] == "clock"
    assert session["description"] == "Volunteer Session"
    assert session["duration_hours"] >= 0

    status = await client.get("/volunteers/me/clock", headers=auth_headers)
    assert status.json()["is_active"] is False


@pytest.mark.asyncio
@pytest.mark.integration
async def test_clock_out_when_idle(client, auth_headers):
    """POST /volunteers/me/clock/out: 409 without an open timer."""
    response = await client.post("/volunteers/me/clock/out", headers=auth_headers)
    assert response.status_code == 409
