"""Tests for project validation, visualizer bootstrap and port selection."""

import socket
import tempfile
import unittest
from pathlib import Path

from claude_viz.core.exceptions import PortUnavailableError
from claude_viz.utils.project import (
    default_output_path,
    ensure_visualizer_dir,
    find_available_port,
    is_port_available,
    validate_claude_project,
)


class ProjectLayoutTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_validate_claude_project(self) -> None:
        self.assertFalse(validate_claude_project(self.root))
        (self.root / ".claude").write_text("not a directory")
        self.assertFalse(validate_claude_project(self.root))

    def test_validate_with_directory(self) -> None:
        (self.root / ".claude").mkdir()
        self.assertTrue(validate_claude_project(self.root))

    def test_default_output_path(self) -> None:
        self.assertEqual(
            default_output_path(self.root),
            self.root / ".claude" / "visualizer" / "graph-data.json",
        )

    def test_ensure_visualizer_dir_creates_gitignore(self) -> None:
        viz_dir = ensure_visualizer_dir(self.root / ".claude" / "visualizer")

        gitignore = viz_dir / ".gitignore"
        self.assertTrue(viz_dir.is_dir())
        self.assertIn("graph-data.json", gitignore.read_text().splitlines())

    def test_existing_gitignore_is_not_overwritten(self) -> None:
        viz_dir = self.root / ".claude" / "visualizer"
        viz_dir.mkdir(parents=True)
        (viz_dir / ".gitignore").write_text("custom\n")

        ensure_visualizer_dir(viz_dir)

        self.assertEqual((viz_dir / ".gitignore").read_text(), "custom\n")


class FindAvailablePortTest(unittest.TestCase):
    def setUp(self) -> None:
        # Hold a listening socket on an ephemeral port for the test
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.listen(1)
        self.busy_port = self.sock.getsockname()[1]

    def tearDown(self) -> None:
        self.sock.close()

    def test_busy_port_is_unavailable(self) -> None:
        self.assertFalse(is_port_available(self.busy_port))

    def test_skips_busy_port(self) -> None:
        port = find_available_port(self.busy_port, attempts=10)

        self.assertGreater(port, self.busy_port)
        self.assertLessEqual(port, self.busy_port + 10)

    def test_raises_when_range_exhausted(self) -> None:
        with self.assertRaises(PortUnavailableError) as ctx:
            find_available_port(self.busy_port, attempts=0)

        self.assertEqual(ctx.exception.preferred, self.busy_port)
        self.assertIn(str(self.busy_port), str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
