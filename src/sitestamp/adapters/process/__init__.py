"""Process adapter - external build tool execution.

Contents:
    * :func:`.build.run_build` - Run the build command and wait for it
"""

from __future__ import annotations

from .build import normalize_returncode, run_build

__all__ = ["normalize_returncode", "run_build"]
