"""Tests for the FastAPI tool service."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from readmegen.operations import TOOLS, Tool, ToolArgs, ToolResult
from readmegen.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_tools_endpoint_lists_registry(client: TestClient) -> None:
    response = client.get("/tools")
    assert response.status_code == 200
    tools = response.json()["tools"]
    assert [tool["name"] for tool in tools] == list(TOOLS)
    pro = next(tool for tool in tools if tool["name"] == "generateReadmePro")
    assert "maxTreeDepth" in pro["inputSchema"]["properties"]


def test_generate_readme_tool(client: TestClient) -> None:
    response = client.post("/tools/generateReadme", json={"name": "demo"})
    assert response.status_code == 200
    content = response.json()["content"]
    assert content[0]["type"] == "text"
    assert content[0]["text"].startswith("# demo\n")


def test_invalid_arguments_are_rejected(client: TestClient) -> None:
    response = client.post("/tools/generateReadme", json={"name": ""})
    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["name"]


def test_unknown_tool_returns_404(client: TestClient) -> None:
    response = client.post("/tools/deleteEverything", json={})
    assert response.status_code == 404


def test_detect_repo_tool_without_body(
    client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    response = client.post("/tools/detectRepo")
    assert response.status_code == 200
    assert response.json()["content"][0]["text"].startswith("未找到 ")


def test_write_file_tool_round_trip(client: TestClient, tmp_path: Path) -> None:
    target = tmp_path / "out" / "README.md"

    preview = client.post(
        "/tools/writeFile", json={"filePath": str(target), "content": "# Title\n"}
    )
    assert preview.status_code == 200
    assert not target.exists()

    written = client.post(
        "/tools/writeFile",
        json={"filePath": str(target), "content": "# Title\n", "confirm": True},
    )
    assert written.status_code == 200
    assert target.read_text(encoding="utf-8") == "# Title\n"


def test_filesystem_errors_map_to_500() -> None:
    def _explode(_: ToolArgs) -> ToolResult:
        raise PermissionError("read-only filesystem")

    failing = Tool(
        name="explode",
        title="Explode",
        description="Always fails",
        args_model=ToolArgs,
        handler=_explode,
    )
    client = TestClient(create_app({"explode": failing}))

    response = client.post("/tools/explode", json={})

    assert response.status_code == 500
    assert "read-only filesystem" in response.json()["detail"]
