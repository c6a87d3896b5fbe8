# topmark:header:start
#
#   project      : JavaStamp
#   file         : runner.py
#   file_relpath : src/javastamp/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the stamping pipeline on one file.

Example:
    ```python
    from pathlib import Path

    from javastamp.config.model import MutableConfig
    from javastamp.pipeline.runner import process_file

    ctx = process_file(Path("Foo.java"), MutableConfig.from_defaults().freeze())
    print(ctx.summary())
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from javastamp.config.logging import get_logger
from javastamp.pipeline.context import ProcessingContext
from javastamp.pipeline.steps.reader import ReaderStep
from javastamp.pipeline.steps.scanner import ScannerStep
from javastamp.pipeline.steps.updater import UpdaterStep
from javastamp.pipeline.steps.writer import WriterStep

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from javastamp.config.logging import StampLogger
    from javastamp.config.model import Config
    from javastamp.pipeline.steps.base import BaseStep

logger: StampLogger = get_logger(__name__)

STAMP_PIPELINE: tuple[Callable[[], BaseStep], ...] = (
    ReaderStep,
    ScannerStep,
    UpdaterStep,
    WriterStep,
)


def process_file(path: Path, config: Config) -> ProcessingContext:
    """Stamp ``path`` according to ``config``.

    Args:
        path (Path): The Java source file to rewrite in place.
        config (Config): Frozen runtime configuration.

    Returns:
        ProcessingContext: The final context (statuses, original and updated lines).

    Raises:
        StampError: Any structural or I/O failure; the file is left untouched
            unless the failure happened while writing.
    """
    ctx = ProcessingContext(path=path, config=config)
    steps: Sequence[BaseStep] = [step_cls() for step_cls in STAMP_PIPELINE]
    for step in steps:
        ctx = step(ctx)
    logger.info("%s", ctx.summary())
    return ctx
