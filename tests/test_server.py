"""
Tests for the command line entry point.
"""

from pathlib import Path

from chuk_mcp_theory.server import build_parser


class TestServerOptions:
    """Tests for server argument parsing."""

    def test_defaults(self) -> None:
        """stdio on port 8000 with the working directory as project."""
        args = build_parser().parse_args([])
        assert args.transport == "stdio"
        assert args.port == 8000
        assert args.project_dir is None
        assert not args.debug

    def test_http_with_project_dir(self, temp_dir: Path) -> None:
        """HTTP transport and a project directory."""
        args = build_parser().parse_args(
            ["--transport", "http", "--port", "9001", "--project-dir", str(temp_dir)]
        )
        assert args.transport == "http"
        assert args.port == 9001
        assert args.project_dir == temp_dir
