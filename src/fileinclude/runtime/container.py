from __future__ import annotations
import argparse
import os
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from fileinclude.constants import DEFAULT_DESTINATION, DEFAULT_MAX_DEPTH, DEFAULT_PATTERNS
from fileinclude.logging.helpers import verbosity_to_level
from fileinclude.parsing.parser import split_list


class ConfigError(ValueError):
    """Raised when the CLI flags do not describe a runnable configuration."""


def _flatten(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    out = []
    for raw in values or ():
        out.extend(split_list(raw))
    return tuple(out)


@dataclass(frozen=True)
class RunConfig:
    """Immutable configuration consumed read-only by the include pipeline."""
    sources: Tuple[str, ...]
    patterns: Tuple[str, ...] = DEFAULT_PATTERNS
    destination: str = DEFAULT_DESTINATION
    omit_source_parent: bool = True
    include_recursive: bool = True
    insert_not_found_placeholder: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH
    copy_plain: bool = False
    strict: bool = False
    log_level: int = verbosity_to_level()
    json_logs: bool = False
    report_path: Optional[str] = None

    def validate(self) -> 'RunConfig':
        if not self.sources:
            raise ConfigError('No source directory given. Please add a source directory using -s or --source')
        if not self.patterns:
            raise ConfigError('No include files given. Please add include files using -i or --include')
        if self.max_depth < 1:
            raise ConfigError('--max-depth must be at least 1')
        return self

    @classmethod
    def from_namespace(cls, ns: argparse.Namespace) -> 'RunConfig':
        """Map parsed CLI flags onto a RunConfig (not validated)."""
        include = _flatten(getattr(ns, 'include', None))
        return cls(
            sources=_flatten(getattr(ns, 'source', None)),
            patterns=include or DEFAULT_PATTERNS,
            destination=ns.destination,
            omit_source_parent=bool(ns.omit_source_parent),
            include_recursive=bool(ns.include_recursive),
            insert_not_found_placeholder=bool(ns.insert_not_found_placeholder),
            max_depth=ns.max_depth,
            copy_plain=bool(ns.copy_plain),
            strict=bool(ns.strict),
            log_level=verbosity_to_level(
                silent=ns.silent,
                verbose=ns.verbose,
                extra_verbose=ns.extra_verbose,
            ),
            json_logs=bool(ns.json_logs) or os.getenv('FILEINCLUDE_JSON_LOGS') == '1',
            report_path=ns.report_path,
        )
