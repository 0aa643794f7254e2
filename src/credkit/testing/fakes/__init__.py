"""Testing fakes – in-memory doubles for kernel ports."""
from credkit.testing.fakes.entropy import FailingEntropySource, FakeEntropySource

__all__ = ["FailingEntropySource", "FakeEntropySource"]
