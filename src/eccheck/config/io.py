# topmark:header:start
#
#   project      : ECCheck
#   file         : io.py
#   file_relpath : src/eccheck/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover and load the ECCheck configuration file.

Two file shapes are supported:

```toml
# eccheck.toml
[policy]
indent_style = "space"
indent_size = 4
trim_trailing_whitespace = true
insert_final_newline = true
end_of_line = "lf"

[files]
exclude = ["*.min.js", "vendor/"]
```

or the same tables under ``[tool.eccheck]`` in ``pyproject.toml``.

Parsing is done with `tomlkit` and unwrapped to plain Python values. Exactly
one file is loaded; there is no merging across directories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from eccheck.config.getters import get_string_list_checked, warn_unknown_keys
from eccheck.config.keys import Toml
from eccheck.config.logging import get_logger
from eccheck.config.policy import StylePolicy, policy_from_table
from eccheck.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from eccheck.core.errors import ConfigError
from eccheck.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog

if TYPE_CHECKING:
    from eccheck.config.getters import TomlTable
    from eccheck.config.logging import EccheckLogger

logger: EccheckLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Loaded configuration.

    Attributes:
        policy (StylePolicy): Policy from the ``[policy]`` table.
        include_patterns (tuple[str, ...]): Gitignore-style include patterns.
        exclude_patterns (tuple[str, ...]): Gitignore-style exclude patterns.
        source (Path | None): File the configuration was read from, if any.
        diagnostics (FrozenDiagnosticLog): Notes and warnings raised while loading.
    """

    policy: StylePolicy = field(default_factory=StylePolicy)
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    source: Path | None = None
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): File to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {exc}") from exc

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    logger.trace("Parsed TOML from %s", path)
    return doc.unwrap()


def _tool_table(doc: TomlTable) -> TomlTable | None:
    """Return the ``[tool.eccheck]`` table of a pyproject document, if present."""
    tool: Any = doc.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = tool.get(PYPROJECT_TOOL_SECTION)
    return table if isinstance(table, dict) else None


def find_config_file(start: Path) -> Path | None:
    """Search ``start`` and its parents for a configuration file.

    In each directory, ``eccheck.toml`` wins over ``pyproject.toml``; the
    latter only counts when it has a ``[tool.eccheck]`` table.

    Args:
        start (Path): Directory (or file) to start from.

    Returns:
        Path | None: The first configuration file found, or None.
    """
    base: Path = start.resolve()
    if not base.is_dir():
        base = base.parent
    for directory in (base, *base.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Found config file: %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                has_tool = _tool_table(load_toml_dict(pyproject)) is not None
            except ConfigError as exc:
                logger.warning("Skipping unreadable %s: %s", pyproject, exc)
                has_tool = False
            if has_tool:
                logger.debug("Found [tool.%s] in %s", PYPROJECT_TOOL_SECTION, pyproject)
                return pyproject
    logger.debug("No config file found from %s", base)
    return None


def config_from_dict(
    data: TomlTable,
    *,
    source: Path | None = None,
    where: str = "",
) -> Config:
    """Build a `Config` from the top-level ECCheck table.

    Args:
        data (TomlTable): Table holding ``policy`` and ``files`` sub-tables.
        source (Path | None): Originating file, recorded on the result.
        where (str): Location prefix used in diagnostic messages.

    Returns:
        Config: The frozen configuration.
    """
    diagnostics = DiagnosticLog()
    prefix: str = f"{where}." if where else ""
    warn_unknown_keys(
        data,
        frozenset({Toml.SECTION_POLICY, Toml.SECTION_FILES}),
        where=where or "<root>",
        diagnostics=diagnostics,
        logger=logger,
    )

    policy = StylePolicy()
    policy_table: Any = data.get(Toml.SECTION_POLICY, {})
    if isinstance(policy_table, dict):
        policy = policy_from_table(
            policy_table, diagnostics=diagnostics, where=f"{prefix}{Toml.SECTION_POLICY}"
        )
    else:
        diagnostics.add_warning(f"Expected table in {prefix}{Toml.SECTION_POLICY}")

    include: list[str] = []
    exclude: list[str] = []
    files_table: Any = data.get(Toml.SECTION_FILES, {})
    if isinstance(files_table, dict):
        files_where: str = f"{prefix}{Toml.SECTION_FILES}"
        warn_unknown_keys(
            files_table,
            Toml.files_keys(),
            where=files_where,
            diagnostics=diagnostics,
            logger=logger,
        )
        include = get_string_list_checked(
            files_table, Toml.KEY_INCLUDE, where=files_where, diagnostics=diagnostics, logger=logger
        )
        exclude = get_string_list_checked(
            files_table, Toml.KEY_EXCLUDE, where=files_where, diagnostics=diagnostics, logger=logger
        )
    else:
        diagnostics.add_warning(f"Expected table in {prefix}{Toml.SECTION_FILES}")

    return Config(
        policy=policy,
        include_patterns=tuple(include),
        exclude_patterns=tuple(exclude),
        source=source,
        diagnostics=diagnostics.freeze(),
    )


def load_config(path: Path) -> Config:
    """Load configuration from ``eccheck.toml`` or ``pyproject.toml``.

    Args:
        path (Path): Config file path.

    Returns:
        Config: The loaded configuration. A ``pyproject.toml`` without a
        ``[tool.eccheck]`` table yields an empty `Config` with an info diagnostic.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    doc: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        table: TomlTable | None = _tool_table(doc)
        if table is None:
            logger.info("%s has no [tool.%s] table", path, PYPROJECT_TOOL_SECTION)
            diagnostics = DiagnosticLog()
            diagnostics.add_info(f"{path} has no [tool.{PYPROJECT_TOOL_SECTION}] table")
            return Config(source=path, diagnostics=diagnostics.freeze())
        return config_from_dict(table, source=path, where=f"tool.{PYPROJECT_TOOL_SECTION}")
    return config_from_dict(doc, source=path)
