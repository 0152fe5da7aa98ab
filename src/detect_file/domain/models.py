from __future__ import annotations

"""
Resolution Domain Data Models.

Defines the transient records exchanged between the resolution stages and
the interface layers. Nothing here outlives a single resolution call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# STAGE MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryProbe:
    """
    Snapshot of a single successful directory listing.

    Attributes:
        path: Directory that was actually opened.
        entries: Entry names in the order the filesystem returned them.
    """
    path: str
    entries: Tuple[str, ...] = ()


class StageStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True)
class StageOutcome:
    """
    Tri-state verdict of one resolution stage.

    INDETERMINATE hands control to the next stage of the chain.
    """
    status: StageStatus
    path: str = ""
    probe: Optional[DirectoryProbe] = None

    @classmethod
    def found(cls, path: str) -> StageOutcome:
        return cls(StageStatus.FOUND, path=path)

    @classmethod
    def not_found(cls) -> StageOutcome:
        return cls(StageStatus.NOT_FOUND)

    @classmethod
    def indeterminate(cls, probe: Optional[DirectoryProbe] = None) -> StageOutcome:
        return cls(StageStatus.INDETERMINATE, probe=probe)

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

class MatchKind(Enum):
    EXACT = "exact"
    CORRECTED = "corrected"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolveResult:
    """
    Terminal outcome of a resolution call.

    Attributes:
        requested: Input exactly as supplied by the caller (stringified).
        kind: Exact hit, case-corrected hit, or not found.
        path: Absolute resolved path, or None when not found.
        stage: Name of the stage that produced the verdict.
    """
    requested: str
    kind: MatchKind
    path: Optional[str] = None
    stage: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is not MatchKind.NOT_FOUND

    def to_dict(self) -> dict:
        return {
            "requested": self.requested,
            "kind": self.kind.value,
            "path": self.path,
            "stage": self.stage,
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_found_result(requested: str, canonical: str, path: str, stage: str) -> ResolveResult:
    """
    Create a successful resolution result.

    The kind is EXACT when the resolved path equals the canonical form of the
    request, CORRECTED when the on-disk casing differs.

    Args:
        requested: Caller input.
        canonical: Canonical form of the request.
        path: Resolved absolute path.
        stage: Stage that located the entry.

    Returns:
        ResolveResult: Immutable found result.
    """
    kind = MatchKind.EXACT if path == canonical else MatchKind.CORRECTED
    return ResolveResult(requested=requested, kind=kind, path=path, stage=stage)


def create_not_found_result(requested: str, stage: str) -> ResolveResult:
    """Create a negative resolution result."""
    return ResolveResult(requested=requested, kind=MatchKind.NOT_FOUND, path=None, stage=stage)
