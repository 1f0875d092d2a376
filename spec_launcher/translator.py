"""Translate test scopes into launches of the external test runner."""

import logging
import os
from dataclasses import dataclass, field
from typing import assert_never

from spec_launcher.config import RunnerSettings
from spec_launcher.models.descriptor import LaunchDescriptor
from spec_launcher.models.scope import TestScope

log = logging.getLogger(__name__)


class OutOfProjectError(Exception):
    """Raised when a test path does not lie under the project root."""

    def __init__(self, path: str, project_root: str) -> None:
        super().__init__(f"Path {path} is out of bounds of {project_root}")
        self.path = path
        self.project_root = project_root


def path_spec(path: str, project_root: str) -> str:
    """Turn an absolute file or folder path into a dot-separated path.

    For example ``/home/dev/webapp/bigbingo/config_test.py`` under
    ``/home/dev/webapp`` becomes ``bigbingo.config_test``.

    Raises:
        OutOfProjectError: If ``path`` does not start with ``project_root``.

    """
    if not path.startswith(project_root):
        raise OutOfProjectError(path, project_root)

    relative_path = path[len(project_root) :]
    if relative_path.startswith(os.sep):
        relative_path = relative_path[len(os.sep) :]
    if relative_path.endswith(".py"):
        relative_path = relative_path[:-3]
    return relative_path.replace(os.sep, ".")


@dataclass(frozen=True, kw_only=True)
class TestSpecTranslator:
    """Build runner launches for test scopes under a project root."""

    __test__ = False

    settings: RunnerSettings = field(default_factory=RunnerSettings)

    def compute_test_spec(self, scope: TestScope, project_root: str) -> str:
        """Compute the dotted spec selecting the tests in ``scope``.

        Args:
            scope: What to run
            project_root: Absolute path of the enclosing project

        Returns:
            Spec such as ``pkg.mod_test.FooTest.test_bar``

        Raises:
            OutOfProjectError: If the scope path is outside the project root

        """
        module_spec = path_spec(scope.path, project_root)
        match scope.kind:
            case "folder" | "script":
                return module_spec
            case "class":
                return f"{module_spec}.{scope.class_name}"
            case "method":
                return f"{module_spec}.{scope.class_name}.{scope.method_name}"
            case "function":
                return f"{module_spec}.{scope.method_name}"
            case _:
                assert_never(scope.kind)

    def build_launch_descriptor(
        self, scope: TestScope, project_root: str
    ) -> LaunchDescriptor:
        """Assemble the runner launch for ``scope``.

        Raises:
            OutOfProjectError: If the scope path is outside the project root

        """
        test_spec = self.compute_test_spec(scope, project_root)
        log.debug("Computed test spec %s for %s", test_spec, scope.path)
        return LaunchDescriptor(
            script_path=f"{project_root}/{self.settings.script_relative_path}",
            working_directory=project_root,
            environment={
                self.settings.spec_env_var: test_spec,
                self.settings.size_env_var: self.settings.max_test_size,
            },
            test_spec=test_spec,
        )

    def is_equivalent(
        self, existing: LaunchDescriptor, scope: TestScope, project_root: str
    ) -> bool:
        """Check whether ``existing`` launches the same process as ``scope`` would.

        Only the script path and environment are compared.
        """
        try:
            fresh = self.build_launch_descriptor(scope, project_root)
        except OutOfProjectError:
            return False
        return (
            existing.script_path == fresh.script_path
            and dict(existing.environment) == dict(fresh.environment)
        )


default_translator = TestSpecTranslator()


def compute_test_spec(scope: TestScope, project_root: str) -> str:
    """Compute a test spec with the default runner settings."""
    return default_translator.compute_test_spec(scope, project_root)


def build_launch_descriptor(scope: TestScope, project_root: str) -> LaunchDescriptor:
    """Build a launch descriptor with the default runner settings."""
    return default_translator.build_launch_descriptor(scope, project_root)


def is_equivalent(
    existing: LaunchDescriptor, scope: TestScope, project_root: str
) -> bool:
    """Compare against a descriptor built with the default runner settings."""
    return default_translator.is_equivalent(existing, scope, project_root)
