from unittest.mock import MagicMock

from college_directory.api.deps.dependencies import get_search_service
from college_directory.models.search import SearchResponse


def test_search_across_levels(client):
    response = client.get("/api/v1/search", params={"q": "fin"})

    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "fin"
    assert [(h["kind"], h["name"]) for h in data["hits"]] == [
        ("department", "Fine Arts"),
        ("department", "Finance"),
        ("class", "Corporate Finance"),
    ]


def test_search_student_hit_has_route_ids(client):
    response = client.get("/api/v1/search", params={"q": "kai"})

    hit = response.json()["hits"][0]
    assert hit["kind"] == "student"
    assert hit["path"] == ["Hillcrest College of Arts", "Fine Arts", "Painting Studio"]
    assert (hit["college_id"], hit["department_id"], hit["class_id"]) == (2, 22, 221)


def test_search_filtered_by_kind(client):
    response = client.get("/api/v1/search", params=[("q", "college"), ("kind", "college")])

    assert response.status_code == 200
    assert response.json()["total"] == 2


def test_search_multiple_kinds(client):
    response = client.get(
        "/api/v1/search",
        params=[("q", "an"), ("kind", "department"), ("kind", "class")],
    )

    assert response.status_code == 200
    kinds = {h["kind"] for h in response.json()["hits"]}
    assert kinds <= {"department", "class"}


def test_search_limit(client):
    response = client.get("/api/v1/search", params={"q": "a", "limit": 2})

    data = response.json()
    assert len(data["hits"]) == 2
    assert data["total"] > 2


def test_search_blank_query(client):
    response = client.get("/api/v1/search", params={"q": "   "})

    assert response.status_code == 400
    assert response.json()["detail"] == "Search query cannot be empty or whitespace-only"


def test_search_missing_query(client):
    response = client.get("/api/v1/search")
    assert response.status_code == 422


def test_search_unknown_kind(client):
    response = client.get("/api/v1/search", params={"q": "a", "kind": "professor"})
    assert response.status_code == 422


def test_search_uses_service(client):
    mock_search_service = MagicMock()
    mock_search_service.search.return_value = SearchResponse(query="x", total=0, hits=[])
    client.app.dependency_overrides[get_search_service] = lambda: mock_search_service

    response = client.get("/api/v1/search", params={"q": "x"})

    assert response.status_code == 200
    mock_search_service.search.assert_called_once_with("x", kinds=None, limit=50)
