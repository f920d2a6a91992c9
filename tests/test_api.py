"""Tests for API endpoints."""

from typing import Any

import pytest
from aiohttp.test_utils import TestClient
from fsml.config import Config, NavConfig, ServerConfig
from fsml.server import create_app


@pytest.fixture
async def client(test_config: Config, aiohttp_client: Any) -> TestClient:
    """Create test client with default configuration."""
    return await aiohttp_client(create_app(test_config))


class TestGetConfig:
    """Tests for GET /api/config."""

    @pytest.mark.asyncio
    async def test__default_config__returns_conventions(self, client: TestClient) -> None:
        """Return index filenames and root manifest."""
        response = await client.get("/api/config")

        assert response.status == 200
        data = await response.json()
        assert data == {
            "indexFilenames": ["index.md", "index.qmd"],
            "rootManifest": "mrmd.md",
            "server": {"host": "127.0.0.1", "port": 8080},
        }

    @pytest.mark.asyncio
    async def test__custom_server__is_reported(self, aiohttp_client: Any) -> None:
        """Report the server section the app was created with."""
        config = Config(server=ServerConfig(host="0.0.0.0", port=9000))
        test_client = await aiohttp_client(create_app(config))

        response = await test_client.get("/api/config")

        data = await response.json()
        assert data["server"] == {"host": "0.0.0.0", "port": 9000}


class TestPostNavigation:
    """Tests for POST /api/navigation."""

    @pytest.mark.asyncio
    async def test__paths__returns_tree(
        self,
        client: TestClient,
        sample_paths: list[str],
    ) -> None:
        """Return the navigation forest for the given paths."""
        response = await client.post("/api/navigation", json={"paths": sample_paths})

        assert response.status == 200
        data = await response.json()
        assert [item["path"] for item in data["items"]] == [
            "01-intro.md",
            "02-getting-started",
            "03-tutorials",
            "appendix.md",
        ]
        getting_started = data["items"][1]
        assert getting_started["isFolder"] is True
        assert getting_started["hasIndex"] is True
        assert len(getting_started["children"]) == 2

    @pytest.mark.asyncio
    async def test__empty_paths__returns_empty_items(self, client: TestClient) -> None:
        """Return empty items for no paths."""
        response = await client.post("/api/navigation", json={"paths": []})

        assert response.status == 200
        data = await response.json()
        assert data["items"] == []

    @pytest.mark.asyncio
    async def test__root__returns_section_children(
        self,
        client: TestClient,
        sample_paths: list[str],
    ) -> None:
        """Return the children of the requested folder."""
        response = await client.post(
            "/api/navigation",
            json={"paths": sample_paths, "root": "02-getting-started"},
        )

        assert response.status == 200
        data = await response.json()
        assert [item["title"] for item in data["items"]] == ["Install", "Config"]

    @pytest.mark.asyncio
    async def test__unknown_root__returns_404(
        self,
        client: TestClient,
        sample_paths: list[str],
    ) -> None:
        """Return 404 for a section that is not in the tree."""
        response = await client.post(
            "/api/navigation",
            json={"paths": sample_paths, "root": "nonexistent"},
        )

        assert response.status == 404
        data = await response.json()
        assert data["error"] == "Section not found"
        assert data["path"] == "nonexistent"

    @pytest.mark.asyncio
    async def test__custom_nav_config__is_applied(self, aiohttp_client: Any) -> None:
        """Use the navigation conventions from the app config."""
        config = Config(navigation=NavConfig(root_manifest="project.md"))
        test_client = await aiohttp_client(create_app(config))

        response = await test_client.post(
            "/api/navigation",
            json={"paths": ["project.md", "mrmd.md"]},
        )

        data = await response.json()
        assert [item["path"] for item in data["items"]] == ["mrmd.md"]

    @pytest.mark.asyncio
    async def test__invalid_json__returns_400(self, client: TestClient) -> None:
        """Reject a body that is not JSON."""
        response = await client.post(
            "/api/navigation",
            data="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status == 400
        data = await response.json()
        assert data["error"] == "Invalid JSON body"

    @pytest.mark.asyncio
    async def test__non_object_body__returns_400(self, client: TestClient) -> None:
        """Reject a JSON body that is not an object."""
        response = await client.post("/api/navigation", json=["a.md"])

        assert response.status == 400
        data = await response.json()
        assert data["error"] == "Request body must be a JSON object"

    @pytest.mark.asyncio
    async def test__non_string_paths__return_400(self, client: TestClient) -> None:
        """Reject paths that are not strings."""
        response = await client.post("/api/navigation", json={"paths": ["a.md", 3]})

        assert response.status == 400
        data = await response.json()
        assert data == {"error": "paths must be a list of strings", "field": "paths"}


class TestPathEndpoints:
    """Tests for POST /api/paths/*."""

    @pytest.mark.asyncio
    async def test__parse__returns_descriptor(self, client: TestClient) -> None:
        """Return the parsed descriptor."""
        response = await client.post(
            "/api/paths/parse",
            json={"path": "02_setup/01-install.md"},
        )

        assert response.status == 200
        data = await response.json()
        assert data["order"] == 1
        assert data["parent"] == "02_setup"
        assert data["depth"] == 1

    @pytest.mark.asyncio
    async def test__parse__missing_path__returns_400(self, client: TestClient) -> None:
        """Require a string path."""
        response = await client.post("/api/paths/parse", json={})

        assert response.status == 400
        data = await response.json()
        assert data["field"] == "path"

    @pytest.mark.asyncio
    async def test__sort__returns_sorted_paths(self, client: TestClient) -> None:
        """Return paths in FSML order."""
        response = await client.post(
            "/api/paths/sort",
            json={"paths": ["appendix.md", "02-b.md", "01-a/x.md", "README.md"]},
        )

        assert response.status == 200
        data = await response.json()
        assert data["paths"] == ["01-a/x.md", "02-b.md", "appendix.md", "README.md"]


class TestPostReorder:
    """Tests for POST /api/reorder."""

    @pytest.mark.asyncio
    async def test__move__returns_plan(self, client: TestClient) -> None:
        """Return the new path and ordered renames."""
        response = await client.post(
            "/api/reorder",
            json={
                "source": "03-results.md",
                "target": "01-intro.md",
                "position": "before",
                "siblings": ["01-intro.md", "02-methods.md", "03-results.md"],
            },
        )

        assert response.status == 200
        data = await response.json()
        assert data == {
            "newPath": "01-results.md",
            "renames": [
                {"from": "02-methods.md", "to": "03-methods.md"},
                {"from": "01-intro.md", "to": "02-intro.md"},
                {"from": "03-results.md", "to": "01-results.md"},
            ],
        }

    @pytest.mark.asyncio
    async def test__siblings_default__to_empty(self, client: TestClient) -> None:
        """Siblings are optional."""
        response = await client.post(
            "/api/reorder",
            json={"source": "notes.md", "target": "guide", "position": "inside"},
        )

        assert response.status == 200
        data = await response.json()
        assert data["newPath"] == "guide/01-notes.md"

    @pytest.mark.asyncio
    async def test__invalid_position__returns_400(self, client: TestClient) -> None:
        """Reject positions other than before, after and inside."""
        response = await client.post(
            "/api/reorder",
            json={"source": "a.md", "target": "b.md", "position": "sideways"},
        )

        assert response.status == 400
        data = await response.json()
        assert data["field"] == "position"
        assert "before, after, inside" in data["error"]

    @pytest.mark.asyncio
    async def test__missing_source__returns_400(self, client: TestClient) -> None:
        """Require source to be a string."""
        response = await client.post(
            "/api/reorder",
            json={"target": "b.md", "position": "before"},
        )

        assert response.status == 400
        data = await response.json()
        assert data == {"error": "source must be a string", "field": "source"}
