"""Match diagnostics against the configured suppression entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

    from graphql_lint.kernel.config.models import LinterConfig, Suppression


def _normalise(path: str) -> str:
    return path.replace("\\", "/")


def matches(entry: Suppression, file: str, line: int, rule: str, value: str) -> bool:
    """True when every non-empty field of ``entry`` matches.

    ``entry.file`` is compared as a path suffix after normalising backslashes,
    ``entry.line`` 0 matches any line.
    """
    if entry.file and not _normalise(file).endswith(_normalise(entry.file)):
        return False
    if entry.line and entry.line != line:
        return False
    if entry.rule and entry.rule != rule:
        return False
    return not entry.value or entry.value == value


def is_suppressed(
    config: LinterConfig | None,
    file: str,
    line: int,
    rule: str,
    value: str = "",
    log: Logger | None = None,
) -> bool:
    """Return True when the first matching entry suppresses the diagnostic.

    Parameters
    ----------
    config : LinterConfig | None
        Loaded configuration; ``None`` suppresses nothing
    file, line, rule, value
        Location, rule id and per-instance discriminator of the diagnostic
    log : Logger | None
        When given, a debug record traces the suppression and its reason
    """
    if config is None or not config.suppressions:
        return False
    for entry in config.suppressions:
        if matches(entry, file, line, rule, value):
            if log is not None:
                log.debug(f"SUPPRESSED: {rule} at line {line} in {file} (reason: {entry.reason})")
            return True
    return False
