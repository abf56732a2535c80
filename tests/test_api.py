"""
Tests for the HTTP endpoints.

Error mapping:
- missing required form fields -> 400
- unknown record -> 404
- another change in flight -> 409
- record store failure -> 502 with the store's response text
"""

import unittest

from fastapi.testclient import TestClient

from coursedesk.app import create_app
from coursedesk.core import CATEGORIES_APP_ID, COURSES_APP_ID
from coursedesk.services.transform import create_record_url

from fake_store import FakeRecordStore


class ApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.store = FakeRecordStore()
        self.art = self.store.add(CATEGORIES_APP_ID, {"name": "Art"})
        self.music = self.store.add(CATEGORIES_APP_ID, {"name": "Musik"})
        self.store.add(
            COURSES_APP_ID,
            {
                "title": "Aquarell",
                "instructor": "A",
                "category": create_record_url(CATEGORIES_APP_ID, self.art),
                "status": "active",
                "current_participants": 25,
            },
        )
        self.store.add(
            COURSES_APP_ID,
            {
                "title": "Gitarre",
                "instructor": "B",
                "category": create_record_url(CATEGORIES_APP_ID, self.music),
            },
        )
        self.client = TestClient(create_app(transport=self.store.transport()))
        self.client.__enter__()

    def tearDown(self) -> None:
        self.client.__exit__(None, None, None)


class TestSystem(ApiTestCase):
    def test_health(self) -> None:
        self.assertEqual(self.client.get("/health").json(), {"ok": True})
        self.assertEqual(self.client.get("/healthz").status_code, 404)

    def test_config(self) -> None:
        data = self.client.get("/config").json()
        self.assertEqual(data["app_ids"]["courses"], COURSES_APP_ID)
        self.assertEqual(
            [s["value"] for s in data["statuses"]], ["active", "upcoming", "completed"]
        )


class TestDashboardEndpoint(ApiTestCase):
    def test_overview(self) -> None:
        response = self.client.get("/api/dashboard")
        self.assertEqual(response.status_code, 200)
        data = response.json()

        self.assertEqual(data["stats"]["total_courses"], 2)
        self.assertEqual(data["stats"]["active_courses"], 1)
        self.assertEqual(data["stats"]["total_participants"], 25)
        self.assertEqual(data["stats"]["categories"], 2)
        self.assertEqual(data["course_count"], 2)
        self.assertIn(data["new_course_form"]["category_id"], {self.art, self.music})

        aquarell = next(c for c in data["courses"] if c["title"] == "Aquarell")
        self.assertEqual(aquarell["category_name"], "Art")
        self.assertEqual(aquarell["max_participants"], 20)
        self.assertEqual(aquarell["fill_percent"], 100.0)
        self.assertTrue(aquarell["is_full"])

    def test_filters(self) -> None:
        data = self.client.get("/api/dashboard", params={"status": "active"}).json()
        self.assertEqual([c["title"] for c in data["courses"]], ["Aquarell"])

        data = self.client.get("/api/dashboard", params={"category": self.music}).json()
        self.assertEqual([c["title"] for c in data["courses"]], ["Gitarre"])

    def test_unknown_status_filter(self) -> None:
        response = self.client.get("/api/dashboard", params={"status": "archived"})
        self.assertEqual(response.status_code, 400)

    def test_numeric_timestamps_do_not_break_overview(self) -> None:
        for record in self.store.apps[COURSES_APP_ID].values():
            record["createdat"] = 1700000000
        response = self.client.get("/api/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["course_count"], 2)

    def test_store_failure_is_502(self) -> None:
        self.store.failures[("GET", CATEGORIES_APP_ID)] = (401, "not logged in")
        response = self.client.get("/api/dashboard")
        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["detail"], "not logged in")
        self.assertEqual(response.json()["upstream_status"], 401)


class TestCourseEndpoints(ApiTestCase):
    def test_create_course(self) -> None:
        response = self.client.post(
            "/api/courses",
            json={"title": "Intro", "instructor": "A", "category_id": self.art},
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["ok"])
        self.assertEqual(response.json()["dashboard"]["stats"]["total_courses"], 3)

        fields = self.store.payloads("POST")[0]["fields"]
        self.assertNotIn("max_participants", fields)
        self.assertNotIn("description", fields)
        self.assertEqual(fields["current_participants"], 0)
        self.assertTrue(fields["category"].endswith(self.art))

    def test_create_course_missing_fields(self) -> None:
        response = self.client.post("/api/courses", json={"title": "Intro"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["missing"], ["instructor", "category_id"])
        self.assertEqual(self.store.sent("POST"), [])

    def test_get_and_update_course(self) -> None:
        courses = self.client.get("/api/courses").json()
        aquarell = next(c for c in courses if c["title"] == "Aquarell")

        detail = self.client.get(f"/api/courses/{aquarell['record_id']}").json()
        self.assertEqual(detail["form"]["title"], "Aquarell")
        self.assertNotIn("current_participants", detail["form"])

        form = {**detail["form"], "max_participants": "30"}
        response = self.client.patch(f"/api/courses/{aquarell['record_id']}", json=form)
        self.assertEqual(response.status_code, 200)

        fields = self.store.payloads("PATCH")[0]["fields"]
        self.assertEqual(fields["max_participants"], 30)
        self.assertEqual(fields["current_participants"], 25)

    def test_course_detail_before_first_load(self) -> None:
        # fresh app: nothing has been loaded yet
        gitarre = next(
            rid
            for rid, rec in self.store.apps[COURSES_APP_ID].items()
            if rec["fields"]["title"] == "Gitarre"
        )
        response = self.client.get(f"/api/courses/{gitarre}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["category_name"], "Musik")

    def test_get_unknown_course(self) -> None:
        response = self.client.get(f"/api/courses/{'f' * 24}")
        self.assertEqual(response.status_code, 404)

    def test_delete_course(self) -> None:
        courses = self.client.get("/api/courses").json()
        response = self.client.delete(f"/api/courses/{courses[0]['record_id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["dashboard"]["stats"]["total_courses"], 1)


class TestCategoryEndpoints(ApiTestCase):
    def test_list_and_get(self) -> None:
        names = sorted(c["name"] for c in self.client.get("/api/categories").json())
        self.assertEqual(names, ["Art", "Musik"])
        self.assertEqual(self.client.get(f"/api/categories/{self.art}").json()["name"], "Art")

    def test_create_update_delete(self) -> None:
        response = self.client.post("/api/categories", json={"name": "Sport"})
        self.assertEqual(response.json()["dashboard"]["stats"]["categories"], 3)

        response = self.client.patch(f"/api/categories/{self.art}", json={"name": "Kunst"})
        names = [c["name"] for c in response.json()["dashboard"]["categories"]]
        self.assertIn("Kunst", names)

        response = self.client.delete(f"/api/categories/{self.music}")
        data = response.json()["dashboard"]
        gitarre = next(c for c in data["courses"] if c["title"] == "Gitarre")
        self.assertEqual(gitarre["category_name"], "Unbekannt")

    def test_empty_name(self) -> None:
        response = self.client.post("/api/categories", json={"name": ""})
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
