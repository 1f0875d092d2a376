"""Models for the process launch handed back to the host."""

import shlex
from collections.abc import Mapping, Sequence

from pydantic import Field

from spec_launcher.models.base import Model


class LaunchDescriptor(Model):
    """Everything needed to start the external test runner."""

    script_path: str = Field(..., description="Absolute path of the runner script")
    working_directory: str = Field(..., description="Directory to run from")
    environment: Mapping[str, str] = Field(
        ..., description="Environment variables selecting the tests"
    )
    test_spec: str = Field(..., description="Dotted spec of the tests to run")

    def command(self, python: str = "python") -> Sequence[str]:
        """Return the argv that starts the runner."""
        return [python, self.script_path]

    def shell_line(self, python: str = "python") -> str:
        """Render the launch as a single shell command line."""
        assignments = " ".join(
            f"{name}={shlex.quote(value)}" for name, value in self.environment.items()
        )
        argv = " ".join(shlex.quote(arg) for arg in self.command(python))
        return f"cd {shlex.quote(self.working_directory)} && {assignments} {argv}"
