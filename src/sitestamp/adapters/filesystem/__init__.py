"""Filesystem adapter - project directory and stamp file handling.

Contents:
    * :func:`.workspace.current_script_path` - Path the program was invoked as
    * :func:`.workspace.locate_project_dir` - Resolve the run's anchor directory
    * :func:`.workspace.enter_directory` - Change the working directory
    * :func:`.workspace.write_stamp` - Write the stamp file
"""

from __future__ import annotations

from .workspace import current_script_path, enter_directory, locate_project_dir, write_stamp

__all__ = ["current_script_path", "enter_directory", "locate_project_dir", "write_stamp"]
