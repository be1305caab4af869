# topmark:header:start
#
#   project      : ECCheck
#   file         : emitters.py
#   file_relpath : src/eccheck/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render check results for humans and machines.

Human output is one line per violation in the familiar ``path:line: message``
shape (file-level violations omit the line), followed by a summary. Machine
output is either a single JSON document or NDJSON (one object per file, then
one summary object).
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from eccheck.checker import FileStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from eccheck.checker import FileReport
    from eccheck.cli.console import ConsoleLike
    from eccheck.config.policy import StylePolicy
    from eccheck.diagnostic.model import FrozenDiagnosticLog


@dataclass(frozen=True)
class RunSummary:
    """Aggregated counts over a run."""

    files: int
    ok: int
    with_violations: int
    skipped: int
    errors: int
    violations: int

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping."""
        return {
            "files": self.files,
            "ok": self.ok,
            "with_violations": self.with_violations,
            "skipped": self.skipped,
            "errors": self.errors,
            "violations": self.violations,
        }


def summarize(reports: Sequence[FileReport]) -> RunSummary:
    """Return aggregated counts for ``reports``."""
    by_status: Counter[FileStatus] = Counter(r.status for r in reports)
    return RunSummary(
        files=len(reports),
        ok=by_status[FileStatus.OK],
        with_violations=by_status[FileStatus.VIOLATIONS],
        skipped=by_status[FileStatus.SKIPPED_BINARY] + by_status[FileStatus.SKIPPED_EMPTY_POLICY],
        errors=sum(1 for r in reports if r.status.is_error),
        violations=sum(len(r.violations) for r in reports),
    )


def emit_diagnostics(console: ConsoleLike, diagnostics: FrozenDiagnosticLog) -> None:
    """Write configuration diagnostics to stderr, colored by severity."""
    for d in diagnostics:
        console.warn(d.level.color(f"[{d.level.value}] {d.message}"))


def emit_human(
    console: ConsoleLike,
    reports: Sequence[FileReport],
    *,
    summary_only: bool,
    verbosity: int,
) -> None:
    """Write the human-readable report.

    Args:
        console (ConsoleLike): Output console.
        reports (Sequence[FileReport]): Per-file results.
        summary_only (bool): Only print the summary.
        verbosity (int): 0 for terse output; above 0 also lists conforming and skipped files.
    """
    if not summary_only:
        for report in reports:
            if report.status.is_error:
                console.error(f"{report.path}: {report.error}")
                continue
            for rv in report.violations:
                loc: str = f"{report.path}:{rv.line}" if rv.line is not None else f"{report.path}"
                console.print(f"{console.styled(loc, bold=True)}: {rv.violation.message}")
            if verbosity > 0 and not report.violations:
                console.print(console.styled(f"{report.path}: {report.status.value}", dim=True))

    s: RunSummary = summarize(reports)
    if s.violations:
        line = (
            f"{s.violations} violation(s) in {s.with_violations} of {s.files} file(s)"
            f" ({s.skipped} skipped, {s.errors} error(s))"
        )
        console.print(console.styled(line, fg="red", bold=True))
    elif verbosity >= 0:
        line = (
            f"{s.files} file(s) checked, no violations"
            f" ({s.skipped} skipped, {s.errors} error(s))"
        )
        console.print(console.styled(line, fg="green"))


def build_json_document(
    reports: Sequence[FileReport],
    *,
    policy: StylePolicy,
    diagnostics: FrozenDiagnosticLog,
    summary_only: bool,
) -> dict[str, Any]:
    """Return the JSON document for a run.

    The ``diagnostics`` entry holds per-level counts of configuration diagnostics.
    """
    doc: dict[str, Any] = {
        "policy": policy.to_dict(),
        "diagnostics": diagnostics.stats().to_dict(),
        "summary": summarize(reports).to_dict(),
    }
    if not summary_only:
        doc["files"] = [r.to_dict() for r in reports]
    return doc


def emit_json(
    console: ConsoleLike,
    reports: Sequence[FileReport],
    *,
    policy: StylePolicy,
    diagnostics: FrozenDiagnosticLog,
    summary_only: bool,
) -> None:
    """Write a single JSON document."""
    doc = build_json_document(
        reports, policy=policy, diagnostics=diagnostics, summary_only=summary_only
    )
    console.print(json.dumps(doc, indent=2))


def emit_ndjson(
    console: ConsoleLike,
    reports: Sequence[FileReport],
    *,
    diagnostics: FrozenDiagnosticLog,
    summary_only: bool,
) -> None:
    """Write one JSON object per file, then a summary object."""
    if not summary_only:
        for r in reports:
            console.print(json.dumps({"kind": "file", **r.to_dict()}))
    summary: dict[str, Any] = {
        "kind": "summary",
        **summarize(reports).to_dict(),
        "diagnostics": diagnostics.stats().to_dict(),
    }
    console.print(json.dumps(summary))
