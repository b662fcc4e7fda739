"""
Integration tests for Recommendations API endpoints.
"""

import pytest


@pytest.fixture
def diamond_client(api_client, api_services):
    """API client over users 1-4 where 1 and 4 share friends 2 and 3."""
    for a, b in [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)]:
        api_services.network.add_connection(a, b)
    return api_client


class TestRecommendationsEndpoints:
    """Tests for /api/v1/users/{user_id}/recommendations."""

    @pytest.mark.api
    def test_common_friends(self, diamond_client):
        response = diamond_client.get("/api/v1/users/1/recommendations/common-friends")

        assert response.status_code == 200
        data = response.json()
        assert data["strategy"] == "common-friends"
        assert data["metric"] == "Common Friends"
        assert data["recommendations"] == [{"user_id": 4, "score": 2}]

    @pytest.mark.api
    def test_distance_default_bound(self, diamond_client):
        response = diamond_client.get("/api/v1/users/1/recommendations/distance")

        data = response.json()
        assert data["max_distance"] == 2
        assert data["recommendations"] == [{"user_id": 4, "score": 2}]

    @pytest.mark.api
    def test_distance_explicit_bound(self, diamond_client):
        response = diamond_client.get(
            "/api/v1/users/1/recommendations/distance",
            params={"max_distance": 3}
        )

        assert response.json()["recommendations"] == [
            {"user_id": 4, "score": 2},
            {"user_id": 5, "score": 3},
        ]

    @pytest.mark.api
    def test_weighted(self, diamond_client):
        response = diamond_client.get("/api/v1/users/1/recommendations/weighted")

        assert response.json()["recommendations"] == [{"user_id": 4, "score": 8}]

    @pytest.mark.api
    def test_all_strategies(self, diamond_client):
        response = diamond_client.get("/api/v1/users/1/recommendations")

        assert response.status_code == 200
        recs = response.json()["recommendations"]
        assert set(recs) == {"common-friends", "distance", "weighted"}
        assert recs["weighted"] == [{"user_id": 4, "score": 8}]

    @pytest.mark.api
    def test_unknown_user(self, api_client):
        """Test unknown users get empty lists, not errors."""
        response = api_client.get("/api/v1/users/99/recommendations")

        assert response.status_code == 200
        assert all(recs == [] for recs in response.json()["recommendations"].values())

    @pytest.mark.api
    def test_unknown_strategy(self, api_client):
        response = api_client.get("/api/v1/users/1/recommendations/popularity")

        assert response.status_code == 422

    @pytest.mark.api
    def test_negative_max_distance(self, api_client):
        response = api_client.get(
            "/api/v1/users/1/recommendations/distance",
            params={"max_distance": -1}
        )

        assert response.status_code == 422
