"""Owner-only file writes for config files holding database passwords."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def secure_mkdir(path: Path) -> None:
    """Create ``path`` with mode 0o700 if missing. Existing directories are left as is."""
    if path.is_dir():
        return
    path.mkdir(parents=True, mode=0o700)
    path.chmod(0o700)


def secure_atomic_write(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` in one rename, file mode 0o600.

    The content goes to a temporary file next to ``path`` first, so a
    crash never leaves a half-written config behind.
    """
    secure_mkdir(path.parent)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp-", suffix=".toml")
    try:
        os.fchmod(fd, 0o600)
        with open(fd, "w", encoding="utf-8") as f:
            f.write(content)
        Path(tmp_path).replace(path)
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise
