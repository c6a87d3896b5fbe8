# topmark:header:start
#
#   project      : JavaStamp
#   file         : __init__.py
#   file_relpath : src/javastamp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JavaStamp package.

JavaStamp rewrites a single Java source file in place so that it carries a
standard license block and an up-to-date ``@version`` tag in the documentation
comment preceding its top-level type declaration. File discovery is left to an
external batch driver; JavaStamp processes exactly one file per invocation.
"""

from __future__ import annotations
