from __future__ import annotations

"""
IncludeRunner – one sequential pass of the include pipeline.

    discovery -> scan -> classify -> resolve -> output path -> write

Each stage runs only when the previous one produced something. Errors are
never raised to the caller: they end up in the returned RunSummary.
"""

import logging
from pathlib import Path
from typing import List, Optional

from fileinclude.core.errors import WriteFailure
from fileinclude.core.interfaces.fs import FileFinderProtocol, OutputSinkProtocol
from fileinclude.core.interfaces.walker import FragmentClassifierProtocol, ResolverProtocol
from fileinclude.core.models import FoundFile, RootFile, SourceFile
from fileinclude.core.report import RunSummary, StageTimer
from fileinclude.discovery.file_discovery import FileDiscovery
from fileinclude.io.walker import SourceWalker
from fileinclude.io.writer import OutputWriter
from fileinclude.logging.helpers import get_logger
from fileinclude.processing.classifier import FragmentClassifier
from fileinclude.processing.resolver import IncludeResolver
from fileinclude.rendering.path_resolver import OutputPathBuilder
from fileinclude.runtime.container import RunConfig


class IncludeRunner:
    def __init__(
        self,
        config: RunConfig,
        *,
        logger: Optional[logging.Logger] = None,
        finder: Optional[FileFinderProtocol] = None,
        sink: Optional[OutputSinkProtocol] = None,
        classifier: Optional[FragmentClassifierProtocol] = None,
    ) -> None:
        self._cfg = config
        self._log = logger or get_logger("runner")
        self._finder = finder or FileDiscovery(logger=get_logger("discovery"))
        self._sink = sink or OutputWriter(logger=get_logger("io.writer"))
        self._classifier = classifier or FragmentClassifier(logger=get_logger("classifier"))
        self._paths = OutputPathBuilder()
        self._summary_log = get_logger("summary")

    def run(self) -> RunSummary:
        cfg = self._cfg
        summary = RunSummary()

        with StageTimer(summary, "discovery"):
            found: List[FoundFile] = self._finder.find(cfg.sources, cfg.patterns)

        scanned: List[SourceFile] = []
        if found:
            with StageTimer(summary, "scan"):
                walker = SourceWalker(summary=summary, keep_plain=cfg.copy_plain, logger=get_logger("io.walker"))
                scanned = walker.scan(found)

        roots: List[RootFile] = []
        if scanned:
            roots = self._classifier.classify(scanned)

        if roots:
            resolver: ResolverProtocol = IncludeResolver(
                include_recursive=cfg.include_recursive,
                summary=summary,
                max_depth=cfg.max_depth,
                logger=get_logger("resolver"),
            )
            for root in roots:
                self._emit(root, resolver, summary)

        summary.finish()
        self._summary_log.info(summary.summary_line())
        self._summary_log.info("Execution time: %.3fs", summary.duration_s or 0.0)
        self._write_report(summary)
        return summary

    def _emit(self, root: RootFile, resolver: ResolverProtocol, summary: RunSummary) -> None:
        cfg = self._cfg
        with StageTimer(summary, "resolve"):
            content = resolver.resolve(root, cfg.insert_not_found_placeholder)

        relpath = self._paths.output_path(root, cfg.omit_source_parent)
        with StageTimer(summary, "write"):
            try:
                written = self._sink.write(cfg.destination, relpath, content)
            except WriteFailure:
                message = f"Cannot write file: {cfg.destination}/{relpath}"
                self._log.error(message)
                summary.record_error(message)
                return
        summary.record_written(written)

    def _write_report(self, summary: RunSummary) -> None:
        if not self._cfg.report_path:
            return
        target = Path(self._cfg.report_path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(summary.to_json(), encoding="utf-8")
        except OSError as exc:
            self._log.warning("⚠  could not write report %s: %s", target, exc)
