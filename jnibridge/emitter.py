"""Artifact emitter base - serializes bridges and writes them out"""

import difflib
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence, Union

from .types import GeneratedFunction

logger = logging.getLogger(__name__)

GENERATOR_NAME = "jnibridge"


def write_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` in one step, creating parent directories"""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()


class ArtifactEmitter:
    """Base class for target-specific emitters.

    Subclasses implement ``render``; ``emit`` renders the whole batch before
    touching the destination, so a failure never leaves a partial artifact.
    """

    def render(self, functions: Sequence[GeneratedFunction]) -> str:
        raise NotImplementedError

    def emit(self, functions: Sequence[GeneratedFunction], destination: Union[str, Path],
             check: bool = False) -> bool:
        """Write the artifact to ``destination``.

        With ``check`` nothing is written; a diff is printed if the file on
        disk is stale. Returns True when the destination is (or would be)
        changed.
        """
        path = Path(destination)
        content = self.render(functions)
        existing = path.read_bytes() if path.exists() else None
        if existing == content.encode("utf-8"):
            logger.debug("%s is up to date", path)
            return False
        if check:
            old_text = existing.decode("utf-8", errors="replace") if existing is not None else ""
            diff = difflib.unified_diff(
                old_text.splitlines(),
                content.splitlines(),
                fromfile=f"a/{path}",
                tofile=f"b/{path}",
                lineterm="",
            )
            print("\n".join(diff))
            return True
        write_atomic(path, content)
        logger.info("Wrote %d bridge functions to %s", len(functions), path)
        return True
