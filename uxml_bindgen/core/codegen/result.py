from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path


def _file_mode(path: Path) -> int:
    """Mode an overwrite of ``path`` should keep, or a fresh file's default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


@dataclass(frozen=True)
class GenerationResult:
    """Final generated source text, written at most once."""

    code: str

    def save(self, output_path: Path) -> None:
        """
        Write the code to ``output_path``.

        The text goes to a temporary file beside the target which then
        replaces it, so a failed write never leaves a truncated file. The
        written file keeps the target's permissions, or gets the usual
        umask-derived ones if the target is new.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(self.code)
            os.chmod(tmp_name, _file_mode(output_path))
            os.replace(tmp_name, output_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
