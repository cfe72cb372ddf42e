#!/usr/bin/env python3
"""Site launcher: build the site in release mode and stamp ``docs/CNAME``.

Copy this file into the site's root, next to its ``docs/`` directory, and
run ``python build.py`` from anywhere. The run is anchored at the directory
holding this file. Requires ``sitestamp`` to be installed.
"""

from sitestamp.entry import main

if __name__ == "__main__":
    raise SystemExit(main())
