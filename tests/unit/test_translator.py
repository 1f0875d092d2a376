"""Tests for the test spec translator."""

import pytest

from spec_launcher.config import RunnerSettings
from spec_launcher.models.descriptor import LaunchDescriptor
from spec_launcher.models.scope import TestScope
from spec_launcher.testing.factories import LaunchDescriptorFactory, ScopeFactory
from spec_launcher.translator import (
    OutOfProjectError,
    TestSpecTranslator,
    build_launch_descriptor,
    compute_test_spec,
    is_equivalent,
    path_spec,
)

ROOT = "/repo"


@pytest.mark.parametrize(
    ("scope", "expected"),
    [
        (TestScope(kind="script", path="/repo/tools/foo_test.py"), "tools.foo_test"),
        (
            TestScope(kind="class", path="/repo/a/b_test.py", class_name="BTest"),
            "a.b_test.BTest",
        ),
        (
            TestScope(
                kind="method",
                path="/repo/a/b_test.py",
                class_name="BTest",
                method_name="test_x",
            ),
            "a.b_test.BTest.test_x",
        ),
        (
            TestScope(kind="function", path="/repo/a/b_test.py", method_name="test_y"),
            "a.b_test.test_y",
        ),
        (TestScope(kind="folder", path="/repo/a/b"), "a.b"),
    ],
)
def test_compute_test_spec(scope: TestScope, expected: str) -> None:
    """Computes dotted specs for every scope kind."""
    assert compute_test_spec(scope, ROOT) == expected


def test_compute_test_spec_out_of_project() -> None:
    """Raises OutOfProjectError for paths outside the project root."""
    scope = TestScope(kind="script", path="/other/x_test.py")

    with pytest.raises(OutOfProjectError) as exc_info:
        compute_test_spec(scope, ROOT)

    assert exc_info.value.path == "/other/x_test.py"
    assert exc_info.value.project_root == ROOT
    assert "out of bounds" in str(exc_info.value)


def test_compute_test_spec_nested_module() -> None:
    """Method spec for a deeply nested file, as shown in the docs."""
    scope = TestScope(
        kind="method",
        path="/root/pkg/mod_test.py",
        class_name="FooTest",
        method_name="test_bar",
    )

    assert compute_test_spec(scope, "/root") == "pkg.mod_test.FooTest.test_bar"


class TestPathSpec:
    """Tests for path_spec."""

    def test_strips_only_trailing_py(self) -> None:
        """Removes exactly the three trailing characters of a .py path."""
        assert path_spec("/repo/a/py_helpers.py", ROOT) == "a.py_helpers"

    def test_keeps_other_suffixes(self) -> None:
        """Leaves paths without a .py suffix untouched apart from separators."""
        assert path_spec("/repo/a/data.pyc", ROOT) == "a.data.pyc"
        assert path_spec("/repo/a/pyfiles", ROOT) == "a.pyfiles"

    def test_strips_single_leading_separator(self) -> None:
        """Only one leading separator is removed after the root."""
        assert path_spec("/repo/a", ROOT) == "a"
        assert path_spec("/repo//a", ROOT) == ".a"

    def test_root_with_trailing_separator(self) -> None:
        """A root ending in a separator still yields a relative spec."""
        assert path_spec("/repo/a/b_test.py", "/repo/") == "a.b_test"

    def test_project_root_itself(self) -> None:
        """The root folder maps to an empty spec."""
        assert path_spec("/repo", ROOT) == ""

    def test_prefix_is_literal(self) -> None:
        """Root containment is a plain string prefix check."""
        assert path_spec("/repository/a.py", ROOT) == "sitory.a"

    def test_never_contains_separator(self) -> None:
        """Results contain no path separators."""
        assert "/" not in path_spec("/repo/a/b/c/d/e_test.py", ROOT)


class TestBuildLaunchDescriptor:
    """Tests for build_launch_descriptor."""

    def test_script_scope(self) -> None:
        """Builds the runner launch for a script."""
        scope = TestScope(kind="script", path="/repo/tools/foo_test.py")

        descriptor = build_launch_descriptor(scope, ROOT)

        assert descriptor == LaunchDescriptor(
            script_path="/repo/tools/load_tests.py",
            working_directory="/repo",
            environment={"TEST_SPECS": "tools.foo_test", "MAX_TEST_SIZE": "huge"},
            test_spec="tools.foo_test",
        )

    def test_is_repeatable(self) -> None:
        """Identical inputs produce equal descriptors."""
        scope = ScopeFactory.build()

        assert build_launch_descriptor(scope, ROOT) == build_launch_descriptor(
            scope, ROOT
        )

    def test_propagates_out_of_project(self) -> None:
        """OutOfProjectError reaches the caller unchanged."""
        scope = ScopeFactory.build(path="/elsewhere/b_test.py")

        with pytest.raises(OutOfProjectError):
            build_launch_descriptor(scope, ROOT)

    def test_custom_settings(self) -> None:
        """Uses the runner settings of the translator."""
        translator = TestSpecTranslator(
            settings=RunnerSettings(
                script_relative_path="bin/run_tests.py",
                spec_env_var="SPECS",
                max_test_size="small",
            )
        )

        descriptor = translator.build_launch_descriptor(ScopeFactory.build(), ROOT)

        assert descriptor.script_path == "/repo/bin/run_tests.py"
        assert descriptor.environment == {
            "SPECS": "a.b_test",
            "MAX_TEST_SIZE": "small",
        }


class TestIsEquivalent:
    """Tests for is_equivalent."""

    def test_own_descriptor_is_equivalent(self) -> None:
        """A descriptor built for the scope matches the scope."""
        scope = ScopeFactory.build()
        descriptor = build_launch_descriptor(scope, ROOT)

        assert is_equivalent(descriptor, scope, ROOT)

    def test_different_scope_is_not_equivalent(self) -> None:
        """A descriptor for another test does not match."""
        descriptor = build_launch_descriptor(ScopeFactory.build(), ROOT)
        other = TestScope(kind="function", path="/repo/a/b_test.py", method_name="t")

        assert not is_equivalent(descriptor, other, ROOT)

    def test_unrelated_descriptor_is_not_equivalent(self) -> None:
        """An arbitrary descriptor does not match."""
        descriptor = LaunchDescriptorFactory.build()

        assert not is_equivalent(descriptor, ScopeFactory.build(), ROOT)

    def test_out_of_project_is_not_equivalent(self) -> None:
        """A scope outside the project never matches."""
        descriptor = build_launch_descriptor(ScopeFactory.build(), ROOT)
        outside = ScopeFactory.build(path="/other/b_test.py")

        assert not is_equivalent(descriptor, outside, ROOT)

    def test_ignores_working_directory_and_spec(self) -> None:
        """Only script path and environment take part in the comparison."""
        scope = ScopeFactory.build()
        descriptor = build_launch_descriptor(scope, ROOT).model_copy(
            update={"working_directory": "/somewhere", "test_spec": "stale"}
        )

        assert is_equivalent(descriptor, scope, ROOT)
