"""KA unittest producer module."""

from spec_launcher.producers.ka_unittest.config import KAUnittestConfig
from spec_launcher.producers.ka_unittest.manifest import ka_unittest_manifest
from spec_launcher.producers.ka_unittest.producer import KAUnittestProducer

__all__ = ["KAUnittestConfig", "KAUnittestProducer", "ka_unittest_manifest"]
