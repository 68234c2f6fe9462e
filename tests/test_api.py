import json
import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from beanie import PydanticObjectId
from fastapi.testclient import TestClient

from app import app
from models.restaurant import Restaurant
from models.search import Pagination
from tests.conftest import make_restaurant, make_result

NEARBY = "/api/v1/restaurants/nearby"
BASE_QUERY = {"latitude": 24.876535, "longitude": 90.724821}

# no `with` block: the lifespan (and its MongoDB connection) never runs
client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Server is running"
    assert {"timestamp", "environment"} <= set(body)


def test_root_banner_lists_endpoints():
    body = client.get("/").json()
    assert body["message"] == "Restaurant Finder API"
    assert set(body["endpoints"]["restaurants"]) == {"nearby", "all", "byId", "cuisines"}


def test_unknown_route():
    response = client.get("/api/v1/menus")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["status"] == "fail"
    assert body["message"] == "Route /api/v1/menus not found"


class TestNearby:
    def test_returns_annotated_restaurants_and_search_echo(self):
        result = make_result(distance=0.5, isOpenNow=True)

        with patch("routers.restaurant.find_nearby", AsyncMock(return_value=[result])) as finder:
            response = client.get(NEARBY, params={**BASE_QUERY, "radius": 5, "cuisine": ["Italian", "Thai"]})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 1
        restaurant = body["data"]["restaurants"][0]
        assert restaurant["_id"] == result.id
        assert restaurant["distance"] == 0.5
        assert restaurant["isOpenNow"] is True
        assert body["data"]["searchParams"] == {
            "location": {"latitude": 24.876535, "longitude": 90.724821},
            "radius": 5,
            "filters": {"cuisine": ["Italian", "Thai"], "priceRange": None, "minRating": None},
        }

        search = finder.await_args.args[0]
        assert search.radius == 5
        assert search.limit == 50

    def test_default_radius(self):
        with patch("routers.restaurant.find_nearby", AsyncMock(return_value=[])):
            body = client.get(NEARBY, params=BASE_QUERY).json()

        assert body["count"] == 0
        assert body["data"]["searchParams"]["radius"] == 2

    def test_unversioned_path(self):
        with patch("routers.restaurant.find_nearby", AsyncMock(return_value=[])):
            response = client.get("/restaurants/nearby", params=BASE_QUERY)

        assert response.status_code == 200

    def test_missing_latitude(self):
        response = client.get(NEARBY, params={"longitude": 90.72})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation error"
        assert [error["field"] for error in body["errors"]] == ["latitude"]

    @pytest.mark.parametrize(
        "params, field",
        [
            ({"latitude": 91}, "latitude"),
            ({"longitude": 181}, "longitude"),
            ({"radius": 0}, "radius"),
            ({"radius": 60}, "radius"),
            ({"priceRange": "$$$$$"}, "priceRange"),
            ({"minRating": 7}, "minRating"),
            ({"cuisine": "Klingon"}, "cuisine.0"),
            ({"limit": 0}, "limit"),
        ],
    )
    def test_rejects_invalid_parameters(self, params, field):
        with patch("routers.restaurant.find_nearby", AsyncMock()) as finder:
            response = client.get(NEARBY, params={**BASE_QUERY, **params})

        assert response.status_code == 400
        assert field in [error["field"] for error in response.json()["errors"]]
        finder.assert_not_awaited()


class TestList:
    def test_paginated_list(self):
        pagination = Pagination(page=2, limit=1, total=3, pages=3)

        with patch("routers.restaurant.list_all", AsyncMock(return_value=([make_result()], pagination))) as lister:
            response = client.get("/api/v1/restaurants", params={"page": 2, "limit": 1, "priceRange": "$$$"})

        body = response.json()
        assert response.status_code == 200
        assert body["count"] == 1
        assert body["pagination"] == {"page": 2, "limit": 1, "total": 3, "pages": 3}
        assert "distance" not in body["data"]["restaurants"][0]
        assert lister.await_args.args[0].price_range == "$$$"

    def test_rejects_page_zero(self):
        assert client.get("/api/v1/restaurants", params={"page": 0}).status_code == 400


class TestGetById:
    def test_found(self):
        restaurant = make_restaurant()

        with patch.object(Restaurant, "get", AsyncMock(return_value=restaurant)):
            response = client.get(f"/api/v1/restaurants/{restaurant.id}")

        assert response.status_code == 200
        payload = response.json()["data"]["restaurant"]
        assert payload["_id"] == str(restaurant.id)
        assert isinstance(payload["isOpenNow"], bool)
        assert "distance" not in payload

    @pytest.mark.parametrize("stored", [None, make_restaurant(isActive=False)])
    def test_missing_or_inactive(self, stored):
        with patch.object(Restaurant, "get", AsyncMock(return_value=stored)):
            response = client.get(f"/api/v1/restaurants/{PydanticObjectId()}")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["status"] == "fail"
        assert body["message"] == "Restaurant not found"

    def test_malformed_id(self):
        with patch.object(Restaurant, "get", AsyncMock()) as getter:
            response = client.get("/api/v1/restaurants/not-an-id")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "restaurant_id"
        getter.assert_not_awaited()


def test_cuisines():
    with patch("routers.restaurant.list_cuisines", AsyncMock(return_value=["Chinese", "Thai"])):
        body = client.get("/api/v1/restaurants/cuisines").json()

    assert body == {"success": True, "count": 2, "data": {"cuisines": ["Chinese", "Thai"]}}


class TestServerErrors:
    unsafe_client = TestClient(app, raise_server_exceptions=False)

    def test_details_hidden_in_production(self):
        with patch("utils.constants.IS_DEVELOPMENT", False), patch(
            "routers.restaurant.list_cuisines", AsyncMock(side_effect=RuntimeError("connection refused"))
        ):
            response = self.unsafe_client.get("/api/v1/restaurants/cuisines")

        assert response.status_code == 500
        assert response.json() == {"success": False, "status": "error", "message": "Something went wrong!"}

    def test_details_shown_in_development(self):
        with patch("utils.constants.IS_DEVELOPMENT", True), patch(
            "routers.restaurant.list_cuisines", AsyncMock(side_effect=RuntimeError("connection refused"))
        ):
            response = self.unsafe_client.get("/api/v1/restaurants/cuisines")

        body = response.json()
        assert response.status_code == 500
        assert body["message"] == "connection refused"
        assert body["error"]["name"] == "RuntimeError"
        assert "RuntimeError" in body["stack"]


DEVELOPMENT_APP_SCRIPT = """
import json
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from app import app

with patch("routers.restaurant.list_cuisines", AsyncMock(side_effect=RuntimeError("connection refused"))):
    response = TestClient(app, raise_server_exceptions=False).get("/api/v1/restaurants/cuisines")
print(json.dumps({"status": response.status_code, "type": response.headers["content-type"], "body": response.json()}))
"""


def test_app_built_in_development_returns_json_envelope():
    root = Path(__file__).resolve().parent.parent
    env = {**os.environ, "ENVIRONMENT": "development", "PYTHONPATH": str(root)}

    completed = subprocess.run(
        [sys.executable, "-c", DEVELOPMENT_APP_SCRIPT], cwd=root, env=env, capture_output=True, text=True, check=True
    )
    result = json.loads(completed.stdout.strip().splitlines()[-1])

    assert result["status"] == 500
    assert result["type"] == "application/json"
    body = result["body"]
    assert body["success"] is False
    assert body["status"] == "error"
    assert body["message"] == "connection refused"
    assert body["error"]["name"] == "RuntimeError"
    assert "stack" in body
