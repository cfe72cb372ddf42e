"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Configuration loading, display and run settings
    * :mod:`.filesystem` - Project directory and stamp file I/O
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.process` - External build tool execution
"""

from __future__ import annotations

__all__: list[str] = []
