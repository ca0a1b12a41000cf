"""Group the files of a directory by extension."""

from .grouper import (
    NO_EXTENSION_PLACEHOLDER,
    GroupTable,
    IoError,
    extension_key,
    render_report,
    scan_directory,
)

__version__ = "0.1.0"
