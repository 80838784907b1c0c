"""Tests for the task, notification and user API endpoints."""


def _create(client, **overrides):
    payload = {
        "title": "Approve budget",
        "description": "FY budget sign-off",
        "createdByUserId": 1,
        **overrides,
    }
    return client.post("/tasks", json=payload)


# === POST /tasks ===


def test_create_task(client):
    """POST /tasks should assign the new task to the Director."""
    resp = _create(client)
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == 1
    assert data["title"] == "Approve budget"
    assert data["description"] == "FY budget sign-off"
    assert data["createdByUserId"] == 1
    assert data["assignedToUserId"] == 2
    assert data["status"] == 0
    assert data["comment"] is None
    assert data["completedAt"] is None
    assert data["chainId"]
    assert "createdAt" in data


def test_create_task_rejects_non_owner(client):
    for user_id in (2, 3, 4, 5, 99):
        resp = _create(client, createdByUserId=user_id)
        assert resp.status_code == 400
        assert "Only Owner can create tasks" in resp.json()["detail"]
    assert client.get("/tasks/2").json() == []


def test_create_task_validates_body(client):
    resp = client.post("/tasks", json={"title": "No creator"})
    assert resp.status_code == 422
    resp = _create(client, title="x" * 201)
    assert resp.status_code == 422


def test_create_task_accepts_empty_text(client):
    """Only the creator's role gates creation; empty strings are valid text."""
    resp = _create(client, title="x", description="")
    assert resp.status_code == 200
    assert resp.json()["description"] == ""
    assert _create(client, title="").status_code == 200
    assert len(client.get("/tasks/2").json()) == 2


# === GET /tasks/{user_id} ===


def test_inbox_lists_active_tasks(client):
    _create(client, title="A")
    _create(client, title="B")
    resp = client.get("/tasks/2")
    assert resp.status_code == 200
    assert [t["title"] for t in resp.json()] == ["A", "B"]


def test_inbox_of_unknown_user_is_empty(client):
    resp = client.get("/tasks/1234")
    assert resp.status_code == 200
    assert resp.json() == []


# === PUT /tasks/{task_id}/complete ===


def test_complete_task(client):
    created = _create(client).json()
    resp = client.put(f"/tasks/{created['id']}/complete", json={"comment": "ok"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == created["id"]
    assert data["status"] == 2
    assert data["comment"] == "ok"
    assert data["completedAt"] is not None

    manager_inbox = client.get("/tasks/3").json()
    assert len(manager_inbox) == 1
    assert manager_inbox[0]["title"] == created["title"]
    assert manager_inbox[0]["chainId"] == created["chainId"]
    assert client.get("/tasks/2").json() == []


def test_complete_missing_task_is_404(client):
    resp = client.put("/tasks/999/complete", json={"comment": "x"})
    assert resp.status_code == 404


def test_complete_twice_is_409(client):
    created = _create(client).json()
    client.put(f"/tasks/{created['id']}/complete", json={"comment": "ok"})
    resp = client.put(f"/tasks/{created['id']}/complete", json={"comment": "again"})
    assert resp.status_code == 409
    assert len(client.get("/tasks/3").json()) == 1


def test_complete_requires_comment(client):
    created = _create(client).json()
    resp = client.put(f"/tasks/{created['id']}/complete", json={})
    assert resp.status_code == 422


# === End-to-end chain ===


def test_approve_budget_chain_end_to_end(client):
    """Owner → Director → Manager → Supervisor → Employee → notification."""
    task = _create(client).json()
    assert (task["id"], task["assignedToUserId"], task["status"]) == (1, 2, 0)

    for holder, next_holder, next_id in ((2, 3, 2), (3, 4, 3), (4, 5, 4)):
        done = client.put(f"/tasks/{task['id']}/complete", json={"comment": "ok"}).json()
        assert done["status"] == 2
        assert done["comment"] == "ok"
        inbox = client.get(f"/tasks/{next_holder}").json()
        assert len(inbox) == 1
        task = inbox[0]
        assert task["id"] == next_id
        assert task["status"] == 0
        assert task["createdByUserId"] == 1

    assert client.get("/notifications/1").json() == []
    done = client.put(f"/tasks/{task['id']}/complete", json={"comment": "ok"}).json()
    assert done["id"] == 4
    assert done["status"] == 2

    notes = client.get("/notifications/1").json()
    assert len(notes) == 1
    assert notes[0]["userId"] == 1
    assert "Approve budget" in notes[0]["message"]
    assert "Employee" in notes[0]["message"]
    assert client.get("/tasks/5").json() == []

    chain = client.get(f"/chains/{task['chainId']}/tasks").json()
    assert [t["id"] for t in chain] == [1, 2, 3, 4]
    assert all(t["status"] == 2 for t in chain)


# === GET /notifications/{user_id} ===


def test_notifications_empty(client):
    resp = client.get("/notifications/1")
    assert resp.status_code == 200
    assert resp.json() == []


# === Users ===


def test_list_users(client):
    users = client.get("/users").json()
    assert [(u["id"], u["role"]) for u in users] == [(1, 0), (2, 1), (3, 2), (4, 3), (5, 4)]


def test_get_user(client):
    assert client.get("/users/5").json() == {"id": 5, "name": "Employee", "role": 4}
    assert client.get("/users/50").status_code == 404
