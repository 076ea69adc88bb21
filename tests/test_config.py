"""
Configuration Tests.

Tests for VizConfig loading from YAML/JSON files and environment overrides.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml

from claude_viz.app.config import VizConfig
from claude_viz.core.exceptions import ClaudeVizError, ConfigError

_CLEAN_ENV = {
    key: value for key, value in os.environ.items()
    if not key.startswith("CLAUDE_VIZ_")
}


class VizConfigTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self._env = mock.patch.dict(os.environ, _CLEAN_ENV, clear=True)
        self._env.start()

    def tearDown(self) -> None:
        self._env.stop()
        self._tmp.cleanup()

    def test_defaults(self) -> None:
        config = VizConfig.load()

        self.assertEqual(config.server.host, "127.0.0.1")
        self.assertEqual(config.server.port, 3000)
        self.assertEqual(config.server.port_attempts, 10)
        self.assertIsNone(config.server.dist_dir)
        self.assertEqual(config.log_level, "INFO")

    def test_missing_file_yields_defaults(self) -> None:
        config = VizConfig.load(self.root / "nope.yaml")
        self.assertEqual(config.to_dict(), VizConfig().to_dict())

    def test_load_yaml(self) -> None:
        path = self.root / "viz_config.yaml"
        path.write_text(yaml.safe_dump({
            "server": {"port": 4000, "dist_dir": "web/dist"},
            "log_level": "DEBUG",
        }))

        config = VizConfig.load(path)

        self.assertEqual(config.server.port, 4000)
        self.assertEqual(config.server.dist_dir, Path("web/dist"))
        self.assertEqual(config.log_level, "DEBUG")

    def test_load_json(self) -> None:
        path = self.root / "viz_config.json"
        path.write_text(json.dumps({"scan": {"output_path": "out/graph.json"}}))

        config = VizConfig.load(path)

        self.assertEqual(config.output_path_for(self.root), Path("out/graph.json"))

    def test_empty_yaml_file(self) -> None:
        path = self.root / "viz_config.yml"
        path.write_text("")
        self.assertEqual(VizConfig.load(path).server.port, 3000)

    def test_environment_overrides_file(self) -> None:
        path = self.root / "viz_config.yaml"
        path.write_text(yaml.safe_dump({"server": {"port": 4000}}))

        with mock.patch.dict(os.environ, {
            "CLAUDE_VIZ_PORT": "5050",
            "CLAUDE_VIZ_HOST": "0.0.0.0",
            "CLAUDE_VIZ_LOG_LEVEL": "debug",
        }):
            config = VizConfig.load(path)

        self.assertEqual(config.server.port, 5050)
        self.assertEqual(config.server.host, "0.0.0.0")
        self.assertEqual(config.log_level, "DEBUG")

    def test_for_project_finds_visualizer_config(self) -> None:
        viz_dir = self.root / ".claude" / "visualizer"
        viz_dir.mkdir(parents=True)
        (viz_dir / "viz_config.yaml").write_text("server:\n  port: 3100\n")

        config = VizConfig.for_project(self.root)

        self.assertEqual(config.server.port, 3100)

    def test_default_output_path(self) -> None:
        config = VizConfig()
        self.assertEqual(
            config.output_path_for(self.root),
            self.root / ".claude" / "visualizer" / "graph-data.json",
        )

    def test_dict_round_trip(self) -> None:
        config = VizConfig.from_dict({
            "server": {"host": "localhost", "port": 8080},
            "scan": {"output_filename": "graph.json"},
        })
        self.assertEqual(VizConfig.from_dict(config.to_dict()), config)

    def test_invalid_log_level_in_file(self) -> None:
        path = self.root / "viz_config.yaml"
        path.write_text(yaml.safe_dump({"log_level": "verbose"}))

        with self.assertRaises(ConfigError) as ctx:
            VizConfig.load(path)

        self.assertIsInstance(ctx.exception, ClaudeVizError)
        self.assertEqual(ctx.exception.key, "log_level")
        self.assertIn("verbose", str(ctx.exception))

    def test_log_level_in_file_is_normalized(self) -> None:
        path = self.root / "viz_config.json"
        path.write_text(json.dumps({"log_level": "warning"}))
        self.assertEqual(VizConfig.load(path).log_level, "WARNING")

    def test_invalid_environment_values(self) -> None:
        with mock.patch.dict(os.environ, {"CLAUDE_VIZ_LOG_LEVEL": "loud"}):
            with self.assertRaises(ConfigError) as ctx:
                VizConfig.load()
        self.assertEqual(ctx.exception.source, "CLAUDE_VIZ_LOG_LEVEL")

        with mock.patch.dict(os.environ, {"CLAUDE_VIZ_PORT": "http"}):
            with self.assertRaises(ConfigError):
                VizConfig.load()


if __name__ == "__main__":
    unittest.main()
