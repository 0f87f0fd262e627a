"""Path generation strategies."""

from modelwalk.generator.base import NoPathFoundError, PathGenerator
from modelwalk.generator.random_path import RandomPath

__all__ = ["NoPathFoundError", "PathGenerator", "RandomPath"]
