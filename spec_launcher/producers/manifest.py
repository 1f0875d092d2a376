"""Producer manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from spec_launcher.config import ProducerConfig, RunnerSettings
from spec_launcher.producers.base import ConfigurationProducer, RunnerSelectionService


@dataclass(frozen=True, kw_only=True)
class ProducerManifest[ConfigT: ProducerConfig]:
    """Manifest describing a producer plugin.

    Hosts create the producer with ``producer_factory``; tools that only
    need the runner calling convention parse the config and stop there.
    """

    config_cls: type[ConfigT]
    producer_factory: Callable[[ConfigT, RunnerSelectionService], ConfigurationProducer]

    def parse_config(self, data: dict[str, Any]) -> ConfigT:
        """Validate raw plugin configuration."""
        return self.config_cls.model_validate(data)

    def runner_settings(self, data: dict[str, Any]) -> RunnerSettings:
        """Runner settings of the plugin configured with ``data``."""
        return self.parse_config(data).runner
