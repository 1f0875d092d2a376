"""Fixtures for integration tests."""

from pathlib import Path

import pytest

RUNNER_SCRIPT = """\
import json
import os
import sys

with open("runner_output.json", "w") as f:
    json.dump(
        {
            "cwd": os.getcwd(),
            "test_specs": os.environ["TEST_SPECS"],
            "max_test_size": os.environ["MAX_TEST_SIZE"],
        },
        f,
    )
sys.exit(int(os.environ.get("RUNNER_EXIT_CODE", "0")))
"""


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a project with a fake tools/load_tests.py runner."""
    tools = tmp_path / "tools"
    tools.mkdir()
    (tools / "load_tests.py").write_text(RUNNER_SCRIPT)
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "mod_test.py").write_text("")
    return tmp_path
