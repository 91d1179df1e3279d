"""
Tests for task, material and note endpoints.
"""
from app.models import Task, Material, Note


# Tasks

def test_create_task_defaults(client, alice_headers, project):
    response = client.post(
        f"/api/projects/{project['id']}/tasks",
        json={"title": "Order cabinets"},
        headers=alice_headers
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Task created successfully"
    task = body["task"]
    assert task["status"] == "not-started"
    assert task["project_id"] == project["id"]
    assert task["due_date"] is None


def test_task_round_trip(client, alice_headers, project):
    payload = {
        "title": "Install sink",
        "description": "Undermount",
        "status": "in-progress",
        "due_date": "2026-11-20",
        "assigned_to": "Dave",
        "notes": "Bring silicone"
    }
    created = client.post(
        f"/api/projects/{project['id']}/tasks", json=payload, headers=alice_headers
    ).json()["task"]

    fetched = client.get(f"/api/tasks/{created['id']}", headers=alice_headers).json()["task"]
    for field, value in payload.items():
        assert fetched[field] == value


def test_create_task_requires_title(client, alice_headers, project, db_session):
    response = client.post(
        f"/api/projects/{project['id']}/tasks", json={"description": "no title"}, headers=alice_headers
    )
    assert response.status_code == 400
    assert response.json() == {"error": "title is required"}
    assert db_session.query(Task).count() == 0


def test_create_task_rejects_unknown_status(client, alice_headers, project):
    response = client.post(
        f"/api/projects/{project['id']}/tasks",
        json={"title": "Paint", "status": "done"},
        headers=alice_headers
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("status:")


def test_list_tasks_newest_first(client, alice_headers, project):
    for title in ("one", "two", "three"):
        client.post(f"/api/projects/{project['id']}/tasks", json={"title": title}, headers=alice_headers)

    response = client.get(f"/api/projects/{project['id']}/tasks", headers=alice_headers)
    assert response.status_code == 200
    assert [t["title"] for t in response.json()["tasks"]] == ["three", "two", "one"]


def test_update_task_full_replace(client, alice_headers, project):
    task = client.post(
        f"/api/projects/{project['id']}/tasks",
        json={"title": "Tile", "status": "delayed", "assigned_to": "Sam"},
        headers=alice_headers
    ).json()["task"]

    response = client.put(f"/api/tasks/{task['id']}", json={"title": "Tile floor"}, headers=alice_headers)
    assert response.status_code == 200
    updated = response.json()["task"]
    assert updated["title"] == "Tile floor"
    assert updated["status"] == "not-started"
    assert updated["assigned_to"] is None
    assert updated["project_id"] == project["id"]


def test_delete_task_then_get(client, alice_headers, project):
    task = client.post(
        f"/api/projects/{project['id']}/tasks", json={"title": "Skip bin"}, headers=alice_headers
    ).json()["task"]

    response = client.delete(f"/api/tasks/{task['id']}", headers=alice_headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Task deleted successfully"}

    response = client.get(f"/api/tasks/{task['id']}", headers=alice_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}


# Materials

def test_create_material(client, alice_headers, project):
    response = client.post(
        f"/api/projects/{project['id']}/materials",
        json={"name": "Plasterboard", "quantity": 12, "unit": "sheets", "ordered": True},
        headers=alice_headers
    )
    assert response.status_code == 201
    material = response.json()["material"]
    assert material["quantity"] == 12
    assert material["ordered"] is True
    assert material["received"] is False


def test_material_quantity_must_be_positive(client, alice_headers, project, db_session):
    for quantity in (0, -3):
        response = client.post(
            f"/api/projects/{project['id']}/materials",
            json={"name": "Screws", "quantity": quantity},
            headers=alice_headers
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("quantity:")
    assert db_session.query(Material).count() == 0


def test_material_quantity_required(client, alice_headers, project):
    response = client.post(
        f"/api/projects/{project['id']}/materials", json={"name": "Screws"}, headers=alice_headers
    )
    assert response.status_code == 400
    assert response.json() == {"error": "quantity is required"}


def test_update_material_rejects_bad_quantity(client, alice_headers, project):
    material = client.post(
        f"/api/projects/{project['id']}/materials",
        json={"name": "Timber", "quantity": 5},
        headers=alice_headers
    ).json()["material"]

    response = client.put(
        f"/api/materials/{material['id']}", json={"name": "Timber", "quantity": 0}, headers=alice_headers
    )
    assert response.status_code == 400

    response = client.put(
        f"/api/materials/{material['id']}",
        json={"name": "Timber", "quantity": 8, "received": True},
        headers=alice_headers
    )
    assert response.status_code == 200
    updated = response.json()["material"]
    assert updated["quantity"] == 8
    assert updated["received"] is True
    assert updated["ordered"] is False


def test_delete_material(client, alice_headers, project):
    material = client.post(
        f"/api/projects/{project['id']}/materials",
        json={"name": "Nails", "quantity": 1, "unit": "box"},
        headers=alice_headers
    ).json()["material"]

    response = client.delete(f"/api/materials/{material['id']}", headers=alice_headers)
    assert response.json() == {"message": "Material deleted successfully"}
    assert client.get(f"/api/materials/{material['id']}", headers=alice_headers).status_code == 404


# Notes

def test_create_note_default_category(client, alice_headers, project):
    response = client.post(
        f"/api/projects/{project['id']}/notes",
        json={"title": "Parking", "content": "Street only", "category": ""},
        headers=alice_headers
    )
    assert response.status_code == 201
    assert response.json()["note"]["category"] == "general"


def test_create_note_requires_content(client, alice_headers, project, db_session):
    response = client.post(
        f"/api/projects/{project['id']}/notes", json={"title": "Empty"}, headers=alice_headers
    )
    assert response.status_code == 400
    assert response.json() == {"error": "content is required"}
    assert db_session.query(Note).count() == 0


def test_update_note(client, alice_headers, project):
    note = client.post(
        f"/api/projects/{project['id']}/notes",
        json={"title": "Client", "content": "Prefers mornings", "category": "client"},
        headers=alice_headers
    ).json()["note"]

    response = client.put(
        f"/api/notes/{note['id']}",
        json={"title": "Client", "content": "Prefers afternoons"},
        headers=alice_headers
    )
    assert response.status_code == 200
    updated = response.json()["note"]
    assert updated["content"] == "Prefers afternoons"
    assert updated["category"] == "general"


def test_list_notes(client, alice_headers, project):
    client.post(f"/api/projects/{project['id']}/notes", json={"title": "a", "content": "1"},
                headers=alice_headers)
    client.post(f"/api/projects/{project['id']}/notes", json={"title": "b", "content": "2"},
                headers=alice_headers)

    response = client.get(f"/api/projects/{project['id']}/notes", headers=alice_headers)
    assert [n["title"] for n in response.json()["notes"]] == ["b", "a"]


# Parent project

def test_list_children_of_missing_project(client, alice_headers):
    for kind in ("tasks", "materials", "notes"):
        response = client.get(f"/api/projects/4242/{kind}", headers=alice_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Project not found"}


def test_create_child_under_missing_project(client, alice_headers):
    response = client.post("/api/projects/4242/tasks", json={"title": "x"}, headers=alice_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Project not found"}


def test_deleting_project_cascades(client, alice_headers, project, db_session):
    pid = project["id"]
    client.post(f"/api/projects/{pid}/tasks", json={"title": "t"}, headers=alice_headers)
    client.post(f"/api/projects/{pid}/materials", json={"name": "m", "quantity": 1}, headers=alice_headers)
    client.post(f"/api/projects/{pid}/notes", json={"title": "n", "content": "c"}, headers=alice_headers)

    assert client.delete(f"/api/projects/{pid}", headers=alice_headers).status_code == 200

    assert db_session.query(Task).count() == 0
    assert db_session.query(Material).count() == 0
    assert db_session.query(Note).count() == 0


def test_material_quantity_must_be_finite(client, alice_headers, project, db_session):
    headers = {**alice_headers, "Content-Type": "application/json"}
    for raw in ("Infinity", "NaN"):
        response = client.post(
            f"/api/projects/{project['id']}/materials",
            content='{"name": "Bricks", "quantity": %s}' % raw,
            headers=headers
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("quantity:")
    assert db_session.query(Material).count() == 0


def test_read_responses_carry_no_message(client, alice_headers, project):
    task = client.post(
        f"/api/projects/{project['id']}/tasks", json={"title": "Measure up"}, headers=alice_headers
    ).json()["task"]

    body = client.get(f"/api/tasks/{task['id']}", headers=alice_headers).json()
    assert set(body) == {"task"}


# Status-only updates

def test_update_task_status(client, alice_headers, project):
    task = client.post(
        f"/api/projects/{project['id']}/tasks",
        json={"title": "Rough-in", "assigned_to": "Sam", "due_date": "2026-12-01"},
        headers=alice_headers
    ).json()["task"]

    response = client.patch(f"/api/tasks/{task['id']}/status", json={"status": "completed"},
                            headers=alice_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Task status updated successfully"
    assert body["task"]["status"] == "completed"
    # Everything else is left alone
    assert body["task"]["title"] == "Rough-in"
    assert body["task"]["assigned_to"] == "Sam"
    assert body["task"]["due_date"] == "2026-12-01"


def test_update_task_status_validation(client, alice_headers, project):
    task = client.post(
        f"/api/projects/{project['id']}/tasks", json={"title": "Rough-in"}, headers=alice_headers
    ).json()["task"]

    response = client.patch(f"/api/tasks/{task['id']}/status", json={"status": "done"}, headers=alice_headers)
    assert response.status_code == 400
    assert response.json()["error"].startswith("status:")

    response = client.patch(f"/api/tasks/{task['id']}/status", json={}, headers=alice_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "status is required"}


def test_update_material_status(client, alice_headers, project):
    material = client.post(
        f"/api/projects/{project['id']}/materials",
        json={"name": "Cement", "quantity": 10, "unit": "bags"},
        headers=alice_headers
    ).json()["material"]

    response = client.patch(
        f"/api/materials/{material['id']}/status",
        json={"ordered": True, "received": True},
        headers=alice_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Material status updated successfully"
    updated = body["material"]
    assert updated["ordered"] is True
    assert updated["received"] is True
    assert updated["name"] == "Cement"
    assert updated["quantity"] == 10
    assert updated["unit"] == "bags"


def test_status_update_of_missing_records(client, alice_headers):
    response = client.patch("/api/tasks/4242/status", json={"status": "completed"}, headers=alice_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}

    response = client.patch("/api/materials/4242/status", json={"ordered": True}, headers=alice_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Material not found"}
