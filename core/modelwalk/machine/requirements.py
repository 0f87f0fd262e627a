"""Requirement types.

Requirement tracking is not wired into the execution context yet; these
types describe what ``ExecutionContext.get_requirements`` will return once a
tracking collaborator exists.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class RequirementStatus(StrEnum):
    NOT_COVERED = "not_covered"
    PASSED = "passed"
    FAILED = "failed"


class Requirement(BaseModel):
    key: str
    description: str = ""
    status: RequirementStatus = RequirementStatus.NOT_COVERED
