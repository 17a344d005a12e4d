from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn, Sequence

from fileinclude.core.report import RunSummary
from fileinclude.logging.helpers import get_logger, setup_base_logger
from fileinclude.parsing.parser import _build_parser
from fileinclude.runtime.container import ConfigError, RunConfig
from fileinclude.runtime.runner import IncludeRunner


logger = get_logger('fileinclude')


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging for a CLI run."""
    global logger
    logger = setup_base_logger(json_logs=enable_json, level=level)


def _fatal(msg: str, code: int = 2) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


class FileInclude:
    """Top-level façade for command-style execution."""

    @staticmethod
    def parse(argv: Sequence[str]) -> RunConfig:
        ns = _build_parser().parse_args(list(argv))
        return RunConfig.from_namespace(ns)

    @staticmethod
    def run(argv: Sequence[str]) -> RunSummary:
        """Run the tool with an argv-like sequence and return the run summary."""
        return FileInclude.execute(FileInclude.parse(argv))

    @staticmethod
    def execute(cfg: RunConfig) -> RunSummary:
        _configure_logging(cfg.json_logs, cfg.log_level)
        try:
            cfg.validate()
        except ConfigError as exc:
            _fatal(str(exc))
        return IncludeRunner(cfg, logger=logger).run()


def main() -> NoReturn:
    """Entry point for the `fileinclude` console script."""
    argv = sys.argv[1:]
    try:
        cfg = FileInclude.parse(argv)
        summary = FileInclude.execute(cfg)
        raise SystemExit(1 if cfg.strict and summary.errors else 0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
