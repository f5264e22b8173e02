"""
End-to-end tests of the HTTP API against an in-memory SQLite store.

System role: Verification of routers, services and CRUD wired together
"""

from uuid import uuid4


def create_course(client, **body):
    payload = {
        "name": "CS101",
        "code": "CS101",
        "assessments": [{"assessment": "midterm", "mark": 30}],
    }
    payload.update(body)
    response = client.post("/api/addCourse", json=payload)
    assert response.status_code == 201
    return response.json()["course"]


def put_dataset(client, course_id, **overrides):
    body = {
        "course": course_id,
        "sem": "Fall",
        "academicYear": "2023",
        "columns": ["student", "midterm"],
        "data": [["alice", 27], ["bob", 22]],
    }
    body.update(overrides)
    return client.put("/api/add-dataset", json=body)


def fetch_datasets(client, **params):
    response = client.get("/api/datasets/filter", params=params)
    assert response.status_code == 200
    return response.json()


class TestCourseLifecycle:
    """Course create/read/update/delete through the API."""

    def test_created_course_round_trips(self, live_client):
        created = create_course(live_client)

        response = live_client.get(f"/api/courses/{created['id']}")

        assert response.status_code == 200
        fetched = response.json()
        assert fetched["name"] == "CS101"
        assert fetched["code"] == "CS101"
        assert fetched["assessments"] == [{"assessment": "midterm", "mark": 30}]

    def test_list_returns_every_course(self, live_client):
        create_course(live_client, name="A")
        create_course(live_client, name="B")

        response = live_client.get("/api/courses")

        assert response.status_code == 200
        assert sorted(c["name"] for c in response.json()) == ["A", "B"]

    def test_update_overwrites_fields(self, live_client):
        created = create_course(live_client)

        response = live_client.put(
            f"/api/updateCourse/{created['id']}",
            json={
                "name": "CS102",
                "code": "CS102",
                "assessments": [
                    {"assessment": "lab", "mark": 10},
                    {"assessment": "final", "mark": 60},
                ],
            },
        )

        assert response.status_code == 200
        course = response.json()["course"]
        assert course["id"] == created["id"]
        assert course["name"] == "CS102"
        assert [a["assessment"] for a in course["assessments"]] == ["lab", "final"]

    def test_update_with_partial_body_clears_the_rest(self, live_client):
        created = create_course(live_client)

        response = live_client.put(
            f"/api/updateCourse/{created['id']}", json={"name": "X"}
        )

        assert response.status_code == 200
        course = response.json()["course"]
        assert course["name"] == "X"
        assert course["code"] is None
        assert course["assessments"] == []

    def test_null_assessments_are_stored_empty(self, live_client):
        created = create_course(live_client, name="A", assessments=None)
        assert created["assessments"] == []

        response = live_client.put(
            f"/api/updateCourse/{created['id']}",
            json={"name": "A", "code": "A1", "assessments": None},
        )

        assert response.status_code == 200
        assert response.json()["course"]["assessments"] == []
        names = live_client.get(f"/api/courses/assessments/{created['id']}")
        assert names.json() == {"assessments": []}

    def test_long_labels_are_accepted(self, live_client):
        created = create_course(live_client, name="N" * 300, code="C" * 100)
        assert created["name"] == "N" * 300

        response = put_dataset(live_client, created["id"], sem="S" * 100)

        assert response.status_code == 200
        stored = fetch_datasets(live_client, course=created["id"])
        assert stored[0]["sem"] == "s" * 100

    def test_update_unknown_course_is_404_and_changes_nothing(self, live_client):
        created = create_course(live_client)

        response = live_client.put(
            f"/api/updateCourse/{uuid4()}", json={"name": "Ghost"}
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Course not found"}
        courses = live_client.get("/api/courses").json()
        assert [c["name"] for c in courses] == [created["name"]]

    def test_delete_twice(self, live_client):
        created = create_course(live_client)

        first = live_client.delete(f"/api/deleteCourse/{created['id']}")
        second = live_client.delete(f"/api/deleteCourse/{created['id']}")

        assert first.status_code == 200
        assert second.status_code == 404
        assert live_client.get(f"/api/courses/{created['id']}").status_code == 404

    def test_assessment_names_keep_order(self, live_client):
        created = create_course(
            live_client,
            assessments=[
                {"assessment": "quiz", "mark": 5},
                {"assessment": "midterm", "mark": 30},
                {"assessment": "quiz", "mark": 5},
            ],
        )

        response = live_client.get(f"/api/courses/assessments/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"assessments": ["quiz", "midterm", "quiz"]}


class TestDatasetMerge:
    """Dataset upsert/merge policy through the API."""

    def test_new_course_and_semester_creates_dataset(self, live_client):
        course = create_course(live_client)

        response = put_dataset(live_client, course["id"], sem="  Fall ")

        assert response.status_code == 200
        assert response.json() == {"message": "Dataset added successfully!"}
        [dataset] = fetch_datasets(live_client)
        assert dataset["sem"] == "fall"
        assert dataset["academicYear"] == ["2023"]
        assert dataset["columns"] == ["student", "midterm"]
        assert dataset["data"] == [["alice", 27], ["bob", 22]]
        assert dataset["course"] == {"id": course["id"], "name": "CS101"}

    def test_duplicate_year_after_normalization_is_rejected(self, live_client):
        course = create_course(live_client)
        put_dataset(live_client, course["id"])

        response = put_dataset(
            live_client, course["id"], academicYear=" 2023 ", concat=True,
            data=[["carol", 30]],
        )

        assert response.status_code == 409
        assert "already exists" in response.json()["message"]
        [dataset] = fetch_datasets(live_client)
        assert dataset["academicYear"] == ["2023"]
        assert len(dataset["data"]) == 2

    def test_new_year_without_concat_is_rejected(self, live_client):
        course = create_course(live_client)
        put_dataset(live_client, course["id"])

        response = put_dataset(live_client, course["id"], academicYear="2024")

        assert response.status_code == 409
        assert response.json() == {
            "message": "Dataset with the same course and semester exists. "
            "Confirm replacement or concatenation."
        }
        [dataset] = fetch_datasets(live_client)
        assert dataset["academicYear"] == ["2023"]

    def test_concat_appends_year_columns_and_rows(self, live_client):
        course = create_course(live_client)
        put_dataset(live_client, course["id"])

        response = put_dataset(
            live_client,
            course["id"],
            sem="FALL",
            academicYear="2024",
            columns=["student", "final", "midterm"],
            data=[["carol", 50, 25]],
            concat=True,
        )

        assert response.status_code == 200
        assert response.json() == {
            "message": "Dataset updated successfully with new academic year and data!"
        }
        [dataset] = fetch_datasets(live_client)
        assert dataset["academicYear"] == ["2023", "2024"]
        assert dataset["columns"] == ["student", "midterm", "final"]
        assert dataset["data"] == [["alice", 27], ["bob", 22], ["carol", 50, 25]]

    def test_missing_fields_are_reported_together(self, live_client):
        response = live_client.put("/api/add-dataset", json={"sem": "fall"})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required fields: course, academicYear, columns, data"
        }


class TestDatasetFilter:
    """Exact-match dataset filtering through the API."""

    def test_filters_by_exact_stored_values(self, live_client):
        first = create_course(live_client, name="Algorithms")
        second = create_course(live_client, name="Databases")
        put_dataset(live_client, first["id"], sem="Fall")
        put_dataset(live_client, first["id"], sem="Spring")
        put_dataset(live_client, second["id"], sem="Fall", academicYear="2022")

        assert len(fetch_datasets(live_client)) == 3

        matches = fetch_datasets(live_client, course=first["id"], sem="fall")
        assert [(d["course"]["name"], d["sem"]) for d in matches] == [("Algorithms", "fall")]

        # Stored value is normalized; query values are not
        assert fetch_datasets(live_client, course=first["id"], sem="Fall") == []

        by_year = fetch_datasets(live_client, academicYear="2022")
        assert [d["course"]["id"] for d in by_year] == [second["id"]]

    def test_dataset_survives_course_deletion(self, live_client):
        course = create_course(live_client)
        put_dataset(live_client, course["id"])

        live_client.delete(f"/api/deleteCourse/{course['id']}")

        [dataset] = fetch_datasets(live_client)
        assert dataset["course"] == {"id": course["id"], "name": None}


def test_health_endpoints(live_client):
    assert live_client.get("/health").json() == {"status": "healthy", "message": "Server Healthy"}
    assert live_client.get("/health/db").json() == {
        "status": "healthy",
        "message": "Database connection OK",
    }


def test_correlation_id_is_echoed(live_client):
    response = live_client.get("/health", headers={"X-Correlation-ID": "req-42"})

    assert response.headers["X-Correlation-ID"] == "req-42"
