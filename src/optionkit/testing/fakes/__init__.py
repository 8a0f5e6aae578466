"""Testing fakes – instrumented doubles for Option producers."""
from optionkit.testing.fakes.producer import CountingProducer

__all__ = ["CountingProducer"]
