# topmark:header:start
#
#   project      : JavaStamp
#   file         : base.py
#   file_relpath : src/javastamp/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*::

    ctx = step(ctx)

Steps mutate the context in place. A step that cannot proceed raises a
`javastamp.errors.StampError`; there is no soft failure mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from javastamp.config.logging import get_logger

if TYPE_CHECKING:
    from javastamp.config.logging import StampLogger
    from javastamp.pipeline.context import ProcessingContext

logger: StampLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclasses override ``run()``; ``__call__`` handles bookkeeping.

    Attributes:
        name (str): Stable step identifier for logs and ``ctx.steps``.
    """

    name: str

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Record the step on ``ctx`` and run it.

        Args:
            ctx (ProcessingContext): The mutable processing context for the current file.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self.name)
        logger.trace("Pipeline step %s - running on %s", self.name, ctx.path)
        self.run(ctx)
        return ctx

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's work, mutating ``ctx`` in place.

        Args:
            ctx (ProcessingContext): The mutable processing context.
        """
        raise NotImplementedError(f"{type(self).__name__}.run()")
