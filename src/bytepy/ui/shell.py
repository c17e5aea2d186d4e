"""
Command shell module for reading and dispatching editor commands.
"""

import contextlib
import logging
import sys
from typing import Callable, Dict, Final, List, Optional, TextIO

from ..core.editor import HexEditor
from ..core.errors import BytepyError, ErrorKind, UsageError
from ..core.syntax import DumpHighlighter
from .reference import BANNER, HELP_TEXT, TEMPLATE_TEXT

with contextlib.suppress(ImportError):
    import readline  # noqa: F401 - line editing and history for input()

logger = logging.getLogger(__name__)

PROMPT: Final[str] = "> "
GOODBYE_MESSAGE: Final[str] = "goodbye for now!"

COMMAND_ALIASES: Final[Dict[str, str]] = {
    'o': 'open',
    'c': 'close',
    'd': 'dump',
    'i': 'inspect',
    'e': 'edit',
    's': 'search',
    't': 'template',
    'h': 'help',
    'q': 'quit',
}

SESSION_COMMANDS: Final = frozenset(('close', 'dump', 'inspect', 'edit', 'search'))


class CommandShell:
    """Reads command lines and runs them against a HexEditor."""

    def __init__(self, editor: HexEditor, highlighter: Optional[DumpHighlighter] = None,
                 out: Optional[TextIO] = None) -> None:
        self.editor = editor
        self.highlighter = highlighter or DumpHighlighter(enabled=False)
        self.out = out or sys.stdout
        self.command_handlers: Dict[str, Callable[[str], bool]] = self._setup_handlers()

    def _setup_handlers(self) -> Dict[str, Callable[[str], bool]]:
        """Set up the command handlers, keyed by long command name."""

        return {
            'open': self._open,
            'close': self._close,
            'dump': self._dump,
            'inspect': self._inspect,
            'edit': self._edit,
            'search': self._search,
            'template': self._template,
            'help': self._help,
            'quit': self._quit,
        }

    def write(self, text: str) -> None:
        print(text, file=self.out)

    def handle_line(self, line: str) -> bool:
        """Run a single command line. Returns False if should quit."""

        parts = line.split(None, 1)
        if not parts:
            return True

        cmd = parts[0]
        rest = parts[1].strip() if len(parts) > 1 else ''
        name = COMMAND_ALIASES.get(cmd, cmd)

        try:
            handler = self.command_handlers.get(name)
            if handler is None:
                raise UsageError(f"unknown command {cmd} type (h)elp!", ErrorKind.UNKNOWN_COMMAND)

            if name in SESSION_COMMANDS:
                self.editor.session.require_open()

            return handler(rest)

        except BytepyError as e:
            logger.info("Command %r failed (%s): %s", line.strip(), e.kind.value, e)
            self.write(str(e))

        return True

    def run(self, path: Optional[str] = None) -> None:
        """
        Run the read-eval-print loop until quit or end of input.

        The open file is closed on every way out of the loop.
        """

        self.write(BANNER)

        try:
            if path:
                self.handle_line(f"open {path}")

            while True:
                try:
                    line = input(PROMPT)
                except (EOFError, KeyboardInterrupt):
                    self.write("")
                    self._quit('')
                    break

                if not self.handle_line(line):
                    break
        finally:
            self.editor.close()

    def _args(self, rest: str) -> List[str]:
        return rest.split()

    def _open(self, rest: str) -> bool:
        closed = self.editor.close()
        if closed:
            self.write(closed)

        # the whole rest of the line, so paths may contain spaces
        self.write(self.editor.open(rest or None))
        return True

    def _close(self, rest: str) -> bool:
        self.write(self.editor.close())
        return True

    def _dump(self, rest: str) -> bool:
        args = self._args(rest)
        offset = args[0] if args else None
        length = args[1] if len(args) > 1 else None

        lines = self.editor.dump(offset, length)
        self.write(self.highlighter.highlight_text('\n'.join(lines)))
        return True

    def _inspect(self, rest: str) -> bool:
        args = self._args(rest)
        offset = args[0] if args else None
        template = ' '.join(args[1:]) if len(args) > 1 else None

        values = self.editor.inspect(offset, template)
        self.write(' '.join(str(value) for value in values))
        return True

    def _edit(self, rest: str) -> bool:
        args = self._args(rest)
        offset = args[0] if args else None

        count = self.editor.edit(offset, args[1:])
        logger.debug("Edited %d bytes at %s", count, offset)
        return True

    def _search(self, rest: str) -> bool:
        shown = rest[1:-1] if len(rest) >= 2 and rest[0] == rest[-1] == '"' else rest

        for offset in self.editor.search(rest or None):
            self.write(f"Found {shown} starting at offset: {offset}")
        return True

    def _template(self, rest: str) -> bool:
        self.write(TEMPLATE_TEXT)
        return True

    def _help(self, rest: str) -> bool:
        self.write(HELP_TEXT)
        return True

    def _quit(self, rest: str) -> bool:
        closed = self.editor.close()
        if closed:
            self.write(closed)
        self.write(GOODBYE_MESSAGE)
        return False
