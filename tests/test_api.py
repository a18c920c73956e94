"""Tests for the HTTP API endpoints."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestRootAndHealth:
    """Tests for GET / and GET /health."""

    def test_root(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "case_studies": 3, "pitches": 0}


class TestBriefEndpoints:
    """Tests for /briefs."""

    def test_create_brief(self, client: TestClient, sample_brief_data):
        response = client.post("/briefs", json=sample_brief_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["status"] == "submitted"

        fetched = client.get(f"/briefs/{data['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["title"] == "E-commerce Platform"

    def test_create_brief_missing_fields(self, client: TestClient):
        response = client.post("/briefs", json={"title": "Half a brief"})

        assert response.status_code == 400
        assert "industry" in response.json()["detail"]

    def test_unknown_brief(self, client: TestClient):
        response = client.get("/briefs/missing")
        assert response.status_code == 404
        assert "missing" in response.json()["detail"]


class TestRecommendationEndpoint:
    """Tests for GET /briefs/{brief_id}/recommendations."""

    def test_ranked_recommendations(self, client: TestClient):
        response = client.get("/briefs/brief-1/recommendations")

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data] == ["cs-match", "cs-partial", "cs-none"]
        assert [item["relevance_score"] for item in data] == [100, 55, 0]
        assert data[0]["breakdown"]["content"] == 1.0

    def test_limit(self, client: TestClient):
        response = client.get("/briefs/brief-1/recommendations", params={"limit": 1})
        assert len(response.json()) == 1

    def test_invalid_limit(self, client: TestClient):
        response = client.get("/briefs/brief-1/recommendations", params={"limit": 0})
        assert response.status_code == 422


class TestCaseStudyEndpoints:
    """Tests for /case-studies."""

    def test_create_and_list(self, client: TestClient):
        response = client.post("/case-studies", json={
            "title": "Educational Learning Platform",
            "industry": "Education",
            "description": "online learning platform with course management",
            "tags": ["education", "learning"],
            "outcome": "Increased student engagement by 60%",
            "budget": "$60,000 - $120,000",
            "timeline": "5-6 months",
        })
        assert response.status_code == 201
        created_id = response.json()["id"]

        listed = client.get("/case-studies").json()
        assert created_id in [item["id"] for item in listed]
        assert client.get(f"/case-studies/{created_id}").status_code == 200

    def test_stats(self, client: TestClient):
        response = client.get("/case-studies/stats", params={"brief_id": "brief-1"})

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["average_relevance_score"] == 52


class TestPitchEndpoints:
    """Tests for pitch generation, editing and review."""

    def _generate(self, client: TestClient) -> dict:
        response = client.post("/briefs/brief-1/pitches", json={"created_by": "member@pitchforge.com"})
        assert response.status_code == 201
        return response.json()

    def test_generate(self, client: TestClient):
        pitch = self._generate(client)

        assert pitch["status"] == "draft"
        assert pitch["version"] == 1
        assert pitch["case_study_ids"] == ["cs-match"]
        assert pitch["content"].startswith("# Executive Summary")

    def test_generate_without_body(self, client: TestClient):
        response = client.post("/briefs/brief-1/pitches")
        assert response.status_code == 201
        assert response.json()["created_by"] is None

    def test_generate_unknown_brief(self, client: TestClient):
        assert client.post("/briefs/missing/pitches").status_code == 404

    def test_edit_bumps_version(self, client: TestClient):
        pitch = self._generate(client)

        response = client.put(f"/pitches/{pitch['id']}", json={"content": pitch["content"] + "\n"})

        assert response.status_code == 200
        assert response.json()["version"] == 2
        assert response.json()["case_study_ids"] == pitch["case_study_ids"]

    def test_empty_edit_rejected(self, client: TestClient):
        pitch_id = self._generate(client)["id"]

        response = client.put(f"/pitches/{pitch_id}", json={})

        assert response.status_code == 400
        assert client.get(f"/pitches/{pitch_id}").json()["version"] == 1

    def test_review_cycle(self, client: TestClient):
        pitch_id = self._generate(client)["id"]

        assert client.post(f"/pitches/{pitch_id}/submit").json()["status"] == "submitted"

        rejected = client.post(f"/pitches/{pitch_id}/reject", json={"feedback": "Tighten the timeline"})
        assert rejected.json()["status"] == "rejected"
        assert rejected.json()["feedback"] == "Tighten the timeline"

        assert client.post(f"/pitches/{pitch_id}/revise").json()["status"] == "draft"

    def test_illegal_transition(self, client: TestClient):
        pitch_id = self._generate(client)["id"]

        response = client.post(f"/pitches/{pitch_id}/approve")

        assert response.status_code == 400
        assert "Cannot approve" in response.json()["detail"]

    def test_reject_without_feedback(self, client: TestClient):
        pitch_id = self._generate(client)["id"]
        client.post(f"/pitches/{pitch_id}/submit")

        assert client.post(f"/pitches/{pitch_id}/reject").status_code == 400

    def test_unknown_action(self, client: TestClient):
        pitch_id = self._generate(client)["id"]
        assert client.post(f"/pitches/{pitch_id}/finalize").status_code == 422

    def test_export(self, client: TestClient):
        pitch_id = self._generate(client)["id"]

        response = client.get(f"/pitches/{pitch_id}/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h1>Call to Action</h1>" in response.text

    def test_stats(self, client: TestClient):
        pitch_id = self._generate(client)["id"]
        self._generate(client)
        client.post(f"/pitches/{pitch_id}/submit")

        data = client.get("/pitches/stats/overview").json()
        assert data["total"] == 2
        assert data["draft"] == 1
        assert data["submitted"] == 1
