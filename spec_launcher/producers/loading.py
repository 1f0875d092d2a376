"""Loading of producers from entry points."""

from collections.abc import Sequence
from importlib.metadata import entry_points
from typing import Any

from spec_launcher.producers.manifest import ProducerManifest

ENTRY_POINT_GROUP = "spec_launcher.producers"
DEFAULT_PRODUCER = "ka-unittest"


class ProducerNotFoundError(Exception):
    """Raised when no producer is registered under a key."""


def available_producers() -> Sequence[str]:
    """Keys of all registered producers, sorted."""
    return sorted(entry.name for entry in entry_points(group=ENTRY_POINT_GROUP))


def load_producer_manifest(key: str = DEFAULT_PRODUCER) -> ProducerManifest[Any]:
    """Load a producer manifest by key.

    Args:
        key: Name of the producer's entry point in the
             ``spec_launcher.producers`` group

    Raises:
        ProducerNotFoundError: If no producer with the given key is found

    """
    for entry in entry_points(group=ENTRY_POINT_GROUP, name=key):
        manifest: ProducerManifest[Any] = entry.load()
        return manifest

    raise ProducerNotFoundError(
        f"Producer '{key}' not found. Available producers: {available_producers()}"
    )
