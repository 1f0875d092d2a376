"""Models for unittest-style run configurations proposed by the host IDE."""

from collections.abc import Mapping
from typing import Literal

from pydantic import Field

from spec_launcher.models.base import Model
from spec_launcher.models.scope import TestKind, TestScope

type RunTestType = Literal[
    "test_folder",
    "test_script",
    "test_class",
    "test_method",
    "test_function",
]

TEST_TYPE_TO_KIND: Mapping[RunTestType, TestKind] = {
    "test_folder": "folder",
    "test_script": "script",
    "test_class": "class",
    "test_method": "method",
    "test_function": "function",
}


class RunConfiguration(Model):
    """A run configuration as the host stores and displays it."""

    name: str = Field(default="", description="Menu and run-list label")
    name_changed_by_user: bool = Field(
        default=False, description="Whether the host should keep the name as is"
    )
    test_type: RunTestType = Field(..., description="What the configuration targets")
    folder_name: str | None = Field(default=None, description="Target folder")
    script_name: str | None = Field(default=None, description="Target script")
    class_name: str | None = Field(default=None, description="Target class")
    method_name: str | None = Field(default=None, description="Target method")
    working_directory: str | None = Field(
        default=None, description="Directory the process starts in"
    )
    envs: Mapping[str, str] = Field(
        default_factory=dict, description="Extra environment variables"
    )

    def to_scope(self) -> TestScope:
        """Describe the configuration's target as a TestScope.

        Raises:
            pydantic.ValidationError: If the fields needed by the test type
                are missing.

        """
        kind = TEST_TYPE_TO_KIND[self.test_type]
        path = self.folder_name if kind == "folder" else self.script_name
        return TestScope(
            kind=kind,
            path=path,
            class_name=self.class_name if kind in ("class", "method") else None,
            method_name=self.method_name if kind in ("method", "function") else None,
        )
