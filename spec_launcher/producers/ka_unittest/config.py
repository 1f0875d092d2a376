"""Configuration for the KA unittest producer."""

from spec_launcher.config import ProducerConfig


class KAUnittestConfig(ProducerConfig):
    """Configuration for the KA unittest producer."""

    # Selecting an unknown framework name hides the host's own unittest entry
    project_configuration: str = "KAUnittests"
    name_prefix: str = "Unittest"
    name_replacement: str = "KA Test"
