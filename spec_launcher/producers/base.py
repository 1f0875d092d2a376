"""Abstract base class for run configuration producers."""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from pydantic import Field

from spec_launcher.models.base import Model
from spec_launcher.models.configuration import RunConfiguration


@runtime_checkable
class RunnerSelectionService(Protocol):
    """Host service holding the test framework selected for a module."""

    def set_project_configuration(self, name: str) -> None:
        """Select the named test framework for the module."""


class ConfigurationContext(Model):
    """Where in the project the user asked to run tests."""

    project_root: str = Field(..., description="Absolute path of the project")
    module: str | None = Field(
        default=None, description="Host module containing the location, if any"
    )


class ConfigurationProducer(ABC):
    """Capability interface the host uses to create run configurations.

    The host proposes a unittest-style configuration for the user's
    location; the producer either rewrites it or declines by returning None.
    """

    @abstractmethod
    def is_available(self, location: str) -> bool:
        """Return whether the producer offers a menu entry at ``location``."""

    @abstractmethod
    def is_test_folder(self, folder: str, project_root: str) -> bool:
        """Return whether ``folder`` may be used as a folder of tests."""

    @abstractmethod
    def setup_configuration_from_context(
        self, proposed: RunConfiguration, context: ConfigurationContext
    ) -> RunConfiguration | None:
        """Rewrite the host's proposal for ``context``.

        Args:
            proposed: Configuration the host computed for the location
            context: Project and module of the location

        Returns:
            The configuration to run, or None to defer to other producers

        """

    def is_configuration_from_context(
        self,
        existing: RunConfiguration,
        proposed: RunConfiguration,
        context: ConfigurationContext,
    ) -> bool:
        """Check whether ``existing`` already covers the location.

        Rather than matching the code structure, the configuration is
        rebuilt for the context and compared by script and environment.
        """
        rebuilt = self.setup_configuration_from_context(proposed, context)
        if rebuilt is None:
            return False
        return existing.script_name == rebuilt.script_name and dict(
            existing.envs
        ) == dict(rebuilt.envs)
