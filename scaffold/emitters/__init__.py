"""Text emitters for the generated fixture and snapshot-test modules."""

from .fixtures import FixtureEmitter
from .tests import TestEmitter

__all__ = ["FixtureEmitter", "TestEmitter"]
