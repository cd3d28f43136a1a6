"""Editor adapter - subprocess wrapper for $EDITOR."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

import click

logger = logging.getLogger(__name__)

# Editors that can show stdin as a read-only markdown buffer
STDIN_VIEWERS = {"vim", "nvim"}


class EditorError(RuntimeError):
    """The editor is not configured or could not be started."""


class EditorService:
    """
    Editor subprocess adapter.

    Opens entries for editing and shows generated reports. The editor's
    exit status is returned but never acted upon.
    """

    def __init__(self, editor: str | None = None):
        editor = editor or os.environ.get("EDITOR", "")
        try:
            self.command = shlex.split(editor)
        except ValueError as e:
            raise EditorError(f"Cannot parse $EDITOR: {e}")
        if not self.command:
            raise EditorError("$EDITOR is not set")

    @property
    def name(self) -> str:
        return Path(self.command[0]).name

    def open(self, path: Path) -> int:
        """Open a file in the editor and wait for it to exit."""
        return self._run([*self.command, str(path)])

    def view(self, text: str) -> int:
        """Show text read-only: piped into vim/nvim, otherwise through a pager."""
        if self.name not in STDIN_VIEWERS:
            logger.debug(f"{self.name} cannot read stdin, using pager")
            click.echo_via_pager(text)
            return 0
        return self._run([*self.command, "-R", "+set filetype=markdown", "-"], text)

    def _run(self, cmd: list[str], stdin_text: str | None = None) -> int:
        try:
            proc = subprocess.run(cmd, input=stdin_text, text=True)
        except FileNotFoundError:
            raise EditorError(f"Editor not found: {self.command[0]}")
        if proc.returncode != 0:
            logger.warning(f"{self.name} exited with status {proc.returncode}")
        return proc.returncode
