from __future__ import annotations

"""
Path Resolution Service.

Implements the resolution chain: a direct existence check, then (when the
caller opts in with 'nocase') a case-insensitive fallback that probes the
enclosing directory and, as a last resort, walks the path from the root to
recover the real on-disk casing. Every stage reports a StageOutcome; only a
FOUND or NOT_FOUND verdict ends the chain.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from detect_file.core.probe import try_readdir
from detect_file.domain.conventions import PathConvention, detect_convention
from detect_file.domain.models import (
    DirectoryProbe,
    ResolveResult,
    StageOutcome,
    StageStatus,
    create_found_result,
    create_not_found_result,
)
from detect_file.infra.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# OPTIONS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolveOptions:
    """
    Per-call resolution options.

    Attributes:
        nocase: Enable the case-insensitive fallback chain.
    """
    nocase: bool = False


OptionsLike = Union[ResolveOptions, Mapping[str, Any], None]


def _nocase_enabled(options: OptionsLike) -> bool:
    """Only an explicit boolean True enables the fallback chain."""
    if options is None:
        return False
    if isinstance(options, ResolveOptions):
        return options.nocase is True
    if isinstance(options, Mapping):
        return options.get("nocase") is True
    return False


# -----------------------------------------------------------------------------
# RESOLVER SERVICE
# -----------------------------------------------------------------------------

class Resolver:
    """
    Stateless resolution service.

    Holds only its collaborators: the filesystem to query and the path
    convention used to canonicalize, split and join paths.
    """

    def __init__(
            self,
            filesystem: Optional[FileSystem] = None,
            convention: Optional[PathConvention] = None,
    ):
        self.fs: FileSystem = filesystem if filesystem is not None else LocalFileSystem()
        self.convention: PathConvention = convention if convention is not None else detect_convention()

    def detect(self, filepath: Any = None, options: OptionsLike = None) -> Optional[str]:
        """
        Resolve the given filepath if it exists.

        Args:
            filepath: Path to detect. Non-string or empty input yields None.
            options: ResolveOptions or a mapping with a 'nocase' key.

        Returns:
            Optional[str]: Absolute resolved path, or None if not found.
        """
        return self.detect_detailed(filepath, options).path

    def detect_detailed(self, filepath: Any = None, options: OptionsLike = None) -> ResolveResult:
        """
        Resolve the given filepath and report how the verdict was reached.

        Args:
            filepath: Path to detect.
            options: ResolveOptions or a mapping with a 'nocase' key.

        Returns:
            ResolveResult: Kind, resolved path and deciding stage.
        """
        requested = filepath if isinstance(filepath, str) else ("" if filepath is None else repr(filepath))

        if not filepath or not isinstance(filepath, str):
            logger.debug(f"Rejected invalid input: {requested!r}")
            return create_not_found_result(requested, stage="input")

        canonical = self.convention.canonicalize(filepath)

        outcome = self._check_direct(filepath, canonical)
        if outcome.status is StageStatus.FOUND:
            return create_found_result(requested, canonical, outcome.path, stage="direct")

        if not _nocase_enabled(options):
            return create_not_found_result(requested, stage="nocase-disabled")

        return self._resolve_nocase(requested, canonical)

    # -------------------------------------------------------------------------
    # STAGES
    # -------------------------------------------------------------------------

    def _check_direct(self, filepath: str, canonical: str) -> StageOutcome:
        """Exact existence check; never lists directories."""
        if self.fs.exists(filepath):
            return StageOutcome.found(canonical)
        return StageOutcome.indeterminate()

    def _resolve_nocase(self, requested: str, canonical: str) -> ResolveResult:
        probe_outcome = self._probe(canonical)
        if probe_outcome.status is StageStatus.NOT_FOUND:
            return create_not_found_result(requested, stage="fuzzy")
        if probe_outcome.status is StageStatus.FOUND:
            return create_found_result(requested, canonical, probe_outcome.path, stage="probe")

        probe = probe_outcome.probe
        outcome = self._match_entries(canonical, probe)
        stage = "probe" if self._is_quick_probe(canonical, probe) else "fuzzy"
        if outcome.status is StageStatus.FOUND:
            logger.debug(f"Case-insensitive match: '{requested}' -> '{outcome.path}'")
            return create_found_result(requested, canonical, outcome.path, stage=stage)
        return create_not_found_result(requested, stage=stage)

    def _probe(self, canonical: str) -> StageOutcome:
        """
        Locate a readable enclosing directory.

        FOUND means the target itself is a readable directory; INDETERMINATE
        carries the listing to search; NOT_FOUND means no ancestor chain
        could be listed.
        """
        probe = try_readdir(canonical, self.fs, self.convention)
        if probe is None:
            return StageOutcome.not_found()
        if probe.path == canonical:
            return StageOutcome.found(probe.path)
        return StageOutcome.indeterminate(probe)

    def _match_entries(self, canonical: str, probe: Optional[DirectoryProbe]) -> StageOutcome:
        """
        Select the first listed entry whose absolute path matches the target.

        Compares the target and its uppercase variant against each candidate
        and its uppercase variant; the candidate is returned in its real case.
        """
        if probe is None:
            return StageOutcome.not_found()

        upper = canonical.upper()
        for name in probe.entries:
            candidate = self.convention.canonicalize(self.convention.join(probe.path, name))
            if canonical == candidate or upper == candidate:
                return StageOutcome.found(candidate)
            candidate_upper = candidate.upper()
            if canonical == candidate_upper or upper == candidate_upper:
                return StageOutcome.found(candidate)

        return StageOutcome.not_found()

    def _is_quick_probe(self, canonical: str, probe: Optional[DirectoryProbe]) -> bool:
        return probe is not None and probe.path == self.convention.dirname(canonical)


# -----------------------------------------------------------------------------
# MODULE-LEVEL FACADE
# -----------------------------------------------------------------------------

def detect(filepath: Any = None, options: OptionsLike = None) -> Optional[str]:
    """
    Resolve the given filepath if it exists.

    Example:
        detect("setup.py")        -> "/home/me/project/setup.py"
        detect("fake-file.json")  -> None

    Args:
        filepath: Path to detect.
        options: Set {'nocase': True} (or ResolveOptions(nocase=True)) to force
                 case-insensitive filename checks on case-sensitive filesystems.

    Returns:
        Optional[str]: The resolved absolute path if it exists, otherwise None.
    """
    return Resolver().detect(filepath, options)


def detect_detailed(filepath: Any = None, options: OptionsLike = None) -> ResolveResult:
    """Resolve the given filepath and return the full ResolveResult."""
    return Resolver().detect_detailed(filepath, options)


resolve = detect
