"""
Linter configuration: which function is checked, which labelled argument it
requires, and which spellings of that argument are accepted.

The call visitor never hard-codes these values; it receives a LinterConfig
at construction so the same traversal can check other APIs. The CLI in
main.py builds one from get_default_config() and its command-line options.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Optional

DEFAULT_FUNCTION_NAME = "NSLocalizedString"
DEFAULT_PARAMETER_LABEL = "bundle"
DEFAULT_ACCEPTED_VALUES: FrozenSet[str] = frozenset({".module", "Bundle.module"})
DEFAULT_FILE_EXTENSION = ".swift"


@dataclass(frozen=True)
class LinterConfig:
    """
    Immutable linter configuration.

    accepted_values are compared verbatim against the argument's source text
    once surrounding whitespace is stripped; no semantic resolution happens,
    so `Bundle.module` and `.module` must both be listed to accept both.
    """

    function_name: str = DEFAULT_FUNCTION_NAME
    parameter_label: str = DEFAULT_PARAMETER_LABEL
    accepted_values: FrozenSet[str] = field(default=DEFAULT_ACCEPTED_VALUES)
    file_extension: str = DEFAULT_FILE_EXTENSION


def get_default_config() -> LinterConfig:
    """Return the configuration checking `NSLocalizedString(..., bundle: .module)`."""
    return LinterConfig()


def override_config(
    config: LinterConfig | None = None,
    *,
    function_name: Optional[str] = None,
    parameter_label: Optional[str] = None,
    accepted_values: Optional[Iterable[str]] = None,
) -> LinterConfig:
    """
    Return a copy of config (or the default config) with the given fields replaced.

    None means "keep the current value"; an empty accepted_values iterable
    is treated the same way so that a CLI option left unset does not make
    every call invalid.
    """
    if config is None:
        config = get_default_config()
    changes: dict = {}
    if function_name:
        changes["function_name"] = function_name
    if parameter_label:
        changes["parameter_label"] = parameter_label
    if accepted_values:
        changes["accepted_values"] = frozenset(v.strip() for v in accepted_values)
    return replace(config, **changes) if changes else config
