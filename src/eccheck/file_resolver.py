# topmark:header:start
#
#   project      : ECCheck
#   file         : file_resolver.py
#   file_relpath : src/eccheck/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for ECCheck from paths and filters.

This module expands positional arguments (files, directories, globs), applies
include/exclude patterns with gitignore semantics, and always drops VCS
metadata directories. Globs are expanded relative to the current working
directory. The result is a deterministic, sorted list of files to check.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from eccheck.config.logging import get_logger
from eccheck.constants import DEFAULT_EXCLUDE_PATTERNS, GLOB_CHARS

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from eccheck.config.logging import EccheckLogger

logger: EccheckLogger = get_logger(__name__)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        rel: Path = path.resolve().relative_to(base.resolve())
        return rel.as_posix()
    except ValueError:
        return path.as_posix()


def has_glob_chars(raw: str | Path) -> bool:
    """Return True if ``raw`` contains glob metacharacters."""
    return any(ch in str(raw) for ch in GLOB_CHARS)


def _glob(p: Path) -> Iterator[Path]:
    """Expand a glob pattern; absolute patterns are expanded from their anchor.

    Raises:
        ValueError: If pathlib rejects the pattern.
    """
    if p.is_absolute():
        return Path(p.anchor).glob(str(p.relative_to(p.anchor)))
    return Path(".").glob(str(p))


def _expand_path(p: Path) -> list[Path]:
    """Expand a path argument into candidate paths.

    Globs are expanded relative to the current working directory, directories
    recursively; a missing path expands to nothing.

    Raises:
        ValueError: If ``p`` is a malformed glob pattern.
    """
    if has_glob_chars(p):
        return list(_glob(p))
    if p.is_dir():
        return list(p.rglob("*"))
    if p.is_file():
        return [p]
    return []


def input_exists(raw: str | Path) -> bool:
    """Return True if ``raw`` is an existing path or a well-formed glob pattern.

    A glob pattern counts even when it matches nothing; a malformed one is
    treated like a missing path.
    """
    p = Path(raw)
    if not has_glob_chars(p):
        return p.exists()
    try:
        next(iter(_glob(p)), None)
    except ValueError:
        return False
    return True


def build_pathspec(patterns: Iterable[str]) -> PathSpec:
    """Compile gitignore-style patterns into a PathSpec."""
    return PathSpec.from_lines("gitwildmatch", list(patterns))


def resolve_file_list(
    paths: Sequence[str | Path],
    *,
    include_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
    root: Path | None = None,
) -> list[Path]:
    """Return the sorted list of files to check.

    Steps:
      1. Expand positional paths (files, directories recursively, and globs);
         malformed glob patterns are logged and skipped.
      2. Keep files only.
      3. If include patterns are given, keep files matching any of them.
      4. Remove files matching an exclude pattern or a VCS directory.

    Patterns are matched against paths relative to ``root`` (default: CWD).

    Args:
        paths (Sequence[str | Path]): Positional path arguments.
        include_patterns (Sequence[str]): Include filter (intersection).
        exclude_patterns (Sequence[str]): Exclude filter (subtraction).
        root (Path | None): Base directory for pattern matching.

    Returns:
        list[Path]: Sorted list of files selected for checking.
    """
    workspace_root: Path = root or Path.cwd()
    candidates: set[Path] = set()

    for raw in paths:
        p = Path(raw)
        try:
            expanded: list[Path] = _expand_path(p)
        except ValueError as exc:
            logger.warning("Invalid glob pattern %s: %s", p, exc)
            continue
        candidates.update(expanded)
        if not expanded:
            if p.exists():
                logger.debug("Empty directory: %s", p)
            elif has_glob_chars(p):
                logger.warning("No matches for glob pattern: %s", p)
            else:
                logger.warning("No such file or directory: %s", p)

    files: list[Path] = filter_file_list(
        [p for p in candidates if p.is_file()],
        include_patterns=include_patterns,
        exclude_patterns=[*DEFAULT_EXCLUDE_PATTERNS, *exclude_patterns],
        root=workspace_root,
    )
    logger.trace("Files to check: %d -- %s", len(files), files)
    return files


def filter_file_list(
    files: Iterable[Path],
    *,
    include_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
    root: Path,
) -> list[Path]:
    """Apply include intersection and exclude subtraction to ``files``.

    Args:
        files (Iterable[Path]): Candidate files.
        include_patterns (Sequence[str]): Keep files matching any of these (if given).
        exclude_patterns (Sequence[str]): Drop files matching any of these.
        root (Path): Base directory the patterns are relative to.

    Returns:
        list[Path]: The remaining files, sorted.
    """
    kept: set[Path] = set(files)
    if include_patterns:
        spec_inc: PathSpec = build_pathspec(include_patterns)
        kept = {p for p in kept if spec_inc.match_file(_rel_for_match(p, root))}
    if exclude_patterns:
        spec_exc: PathSpec = build_pathspec(exclude_patterns)
        kept = {p for p in kept if not spec_exc.match_file(_rel_for_match(p, root))}
    return sorted(kept)
