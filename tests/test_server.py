"""Visualizer server route tests."""

import json
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from claude_viz.server.app import ServerOptions, create_app


class ServerTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.data_path = self.root / ".claude" / "visualizer" / "graph-data.json"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def client(self, dist_dir: Path | None = None) -> TestClient:
        options = ServerOptions(
            port=3000,
            project_root=self.root,
            data_path=self.data_path,
            dist_dir=dist_dir,
        )
        return TestClient(create_app(options))

    def write_data(self, payload: dict | str) -> None:
        self.data_path.parent.mkdir(parents=True, exist_ok=True)
        text = payload if isinstance(payload, str) else json.dumps(payload)
        self.data_path.write_text(text, encoding="utf-8")


class ApiRoutesTest(ServerTestCase):
    def test_graph_data_missing_returns_404(self) -> None:
        response = self.client().get("/api/graph-data")

        self.assertEqual(response.status_code, 404)
        body = response.json()
        self.assertEqual(body["error"], "Graph data not found")
        self.assertIn("scanner", body["message"])
        self.assertEqual(body["path"], str(self.data_path))

    def test_graph_data_invalid_json_returns_404(self) -> None:
        self.write_data("{not json")
        response = self.client().get("/api/graph-data")
        self.assertEqual(response.status_code, 404)

    def test_graph_data_is_served(self) -> None:
        payload = {"nodes": [], "edges": [], "metadata": {"projectName": "demo"}}
        self.write_data(payload)

        response = self.client().get("/api/graph-data")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), payload)

    def test_health(self) -> None:
        client = self.client()

        before = client.get("/api/health").json()
        self.write_data({"nodes": [], "edges": []})
        after = client.get("/api/health").json()

        self.assertEqual(before["status"], "ok")
        self.assertFalse(before["dataExists"])
        self.assertTrue(after["dataExists"])
        self.assertEqual(after["projectRoot"], str(self.root))
        self.assertEqual(after["dataPath"], str(self.data_path))

    def test_cors_header(self) -> None:
        response = self.client().get("/api/health", headers={"Origin": "http://localhost:5173"})
        self.assertEqual(response.headers.get("access-control-allow-origin"), "*")


class StaticFilesTest(ServerTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.dist = self.root / "dist"
        (self.dist / "assets").mkdir(parents=True)
        (self.dist / "index.html").write_text("<html>viz</html>")
        (self.dist / "favicon.svg").write_text("<svg/>")
        (self.dist / "assets" / "app.js").write_text("console.log('viz')")

    def test_index_and_spa_fallback(self) -> None:
        client = self.client(self.dist)

        self.assertIn("viz", client.get("/").text)
        self.assertIn("viz", client.get("/graph/agent:reviewer").text)

    def test_static_files(self) -> None:
        client = self.client(self.dist)

        self.assertEqual(client.get("/assets/app.js").text, "console.log('viz')")
        self.assertEqual(client.get("/favicon.svg").text, "<svg/>")

    def test_api_routes_take_precedence(self) -> None:
        response = self.client(self.dist).get("/api/health")
        self.assertEqual(response.json()["status"], "ok")

    def test_without_bundle_only_api_is_served(self) -> None:
        client = self.client(self.root / "missing-dist")
        self.assertEqual(client.get("/").status_code, 404)


if __name__ == "__main__":
    unittest.main()
