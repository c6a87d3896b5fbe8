# topmark:header:start
#
#   project      : JavaStamp
#   file         : __init__.py
#   file_relpath : src/javastamp/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing pipeline for a single Java source file.

The pipeline runs four steps over a shared `ProcessingContext`:

    read → scan (locate + validate) → update (version + license) → write

All validation happens before the writer runs, so a failing file is never
partially rewritten. See `javastamp.pipeline.runner.process_file`.
"""

from __future__ import annotations
