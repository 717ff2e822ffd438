"""File helpers.

Public API:
    - Copy: ``copy_with_hash``
    - Writers: ``create``, ``save``, ``save_or_overwrite``, ``save_buffer``,
      ``save_or_overwrite_buffer``
    - Handles: ``open_file``, ``close``
    - Paths: ``mkdir_parent``, ``sanitize_file_path``
    - Directories: ``get_home_dir``, ``join_home_path``, ``get_working_directory``,
      ``join_working_directory``, ``configure_directories``, ``reset_directories``
"""

from .dirs import (
    DirectoryResolver,
    configure_directories,
    get_home_dir,
    get_working_directory,
    join_home_path,
    join_working_directory,
    reset_directories,
)
from .files import (
    BUFFER_CHUNK_SIZE,
    CHUNK_SIZE,
    close,
    copy_with_hash,
    create,
    open_file,
    save,
    save_buffer,
    save_or_overwrite,
    save_or_overwrite_buffer,
)
from .paths import mkdir_parent, sanitize_file_path

__all__ = [
    "BUFFER_CHUNK_SIZE",
    "CHUNK_SIZE",
    "DirectoryResolver",
    "close",
    "configure_directories",
    "copy_with_hash",
    "create",
    "get_home_dir",
    "get_working_directory",
    "join_home_path",
    "join_working_directory",
    "mkdir_parent",
    "open_file",
    "reset_directories",
    "sanitize_file_path",
    "save",
    "save_buffer",
    "save_or_overwrite",
    "save_or_overwrite_buffer",
]
