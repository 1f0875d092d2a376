"""KA unittest producer implementation.

KA tests can't run as plain unittest tests because they need imports and
global state set up first. ``tools/load_tests.py`` is a unittest-compatible
suite that reads the tests to load from the environment, so this producer
rewrites the host's unittest configurations into launches of that script.
"""

import logging
from dataclasses import dataclass, field

from spec_launcher.models.configuration import RunConfiguration
from spec_launcher.producers.base import (
    ConfigurationContext,
    ConfigurationProducer,
    RunnerSelectionService,
)
from spec_launcher.producers.ka_unittest.config import KAUnittestConfig
from spec_launcher.translator import OutOfProjectError, TestSpecTranslator

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class KAUnittestProducer(ConfigurationProducer):
    """Producer running KA tests through the load_tests.py runner."""

    config: KAUnittestConfig
    runner_service: RunnerSelectionService = field(repr=False)

    @property
    def translator(self) -> TestSpecTranslator:
        """Translator using the configured runner settings."""
        return TestSpecTranslator(settings=self.config.runner)

    @classmethod
    def from_config(
        cls, config: KAUnittestConfig, runner_service: RunnerSelectionService
    ) -> "KAUnittestProducer":
        """Create a producer bound to the host's runner service."""
        return cls(config=config, runner_service=runner_service)

    def is_available(self, location: str) -> bool:
        """Always offer the entry, though the framework selection hides unittest."""
        return True

    def is_test_folder(self, folder: str, project_root: str) -> bool:
        """Any folder works; all tests found in it are run."""
        return True

    def setup_configuration_from_context(
        self, proposed: RunConfiguration, context: ConfigurationContext
    ) -> RunConfiguration | None:
        """Rewrite the proposal into a launch of the runner script."""
        if context.module is None:
            return None
        self.runner_service.set_project_configuration(
            self.config.project_configuration
        )

        try:
            descriptor = self.translator.build_launch_descriptor(
                proposed.to_scope(), context.project_root
            )
        except OutOfProjectError as e:
            log.debug("Declining configuration: %s", e)
            return None

        # TODO: method entries keep the class name in their label; dropping it
        # needs a dedicated configuration type instead of a renamed unittest one.
        return proposed.model_copy(
            update={
                "name": proposed.name.replace(
                    self.config.name_prefix, self.config.name_replacement, 1
                ),
                "name_changed_by_user": True,
                "test_type": "test_script",
                "script_name": descriptor.script_path,
                "envs": dict(descriptor.environment),
                "working_directory": descriptor.working_directory,
            }
        )
