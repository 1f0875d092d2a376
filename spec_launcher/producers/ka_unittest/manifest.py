"""KA unittest producer manifest."""

from spec_launcher.producers.ka_unittest.config import KAUnittestConfig
from spec_launcher.producers.ka_unittest.producer import KAUnittestProducer
from spec_launcher.producers.manifest import ProducerManifest

ka_unittest_manifest = ProducerManifest(
    config_cls=KAUnittestConfig,
    producer_factory=KAUnittestProducer.from_config,
)
