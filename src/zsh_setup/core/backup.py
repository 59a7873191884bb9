"""Timestamped backup naming shared by every step that replaces user files."""

from datetime import datetime
from pathlib import Path

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def backup_path_for(path: Path, now: datetime) -> Path:
    """Return ``<path>.backup.<YYYYMMDD_HHMMSS>`` next to the original.

    Two backups taken within the same second map to the same path; the later
    one wins.

    Example:
        >>> backup_path_for(Path("/home/me/.zshrc"), datetime(2024, 1, 15, 14, 30, 5))
        PosixPath('/home/me/.zshrc.backup.20240115_143005')
    """
    return path.with_name(f"{path.name}.backup.{now.strftime(BACKUP_TIMESTAMP_FORMAT)}")
