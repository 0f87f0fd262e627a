"""Execution context configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_SCRIPT_LANGUAGE = "python"


@dataclass
class ContextConfig:
    """Settings for an ``ExecutionContext``.

    Attributes:
        script_language: Evaluator language used when no evaluator is injected.
        check_self_loops: Warn about unnamed self-loop edges in ``set_model``.
    """

    script_language: str = DEFAULT_SCRIPT_LANGUAGE
    check_self_loops: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "script_language": self.script_language,
            "check_self_loops": self.check_self_loops,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContextConfig":
        return cls(
            script_language=data.get("script_language", DEFAULT_SCRIPT_LANGUAGE),
            check_self_loops=data.get("check_self_loops", True),
        )
