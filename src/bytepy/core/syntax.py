"""
Syntax highlighting module for hex dump output using Pygments.
"""

from typing import Final

from pygments import highlight
from pygments.formatters.terminal import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer

DEFAULT_BACKGROUND: Final[str] = 'dark'


class DumpHighlighter:
    """Colors hex dump lines for terminal output using Pygments."""

    def __init__(self, enabled: bool = True, background: str = DEFAULT_BACKGROUND) -> None:
        self.enabled = enabled
        self.lexer = HexdumpLexer()
        self.formatter = TerminalFormatter(bg=background)

    def highlight_text(self, text: str) -> str:
        """
        Highlight a block of dump text.

        Args:
            text: Dump lines joined with newlines

        Returns:
            The text with terminal color escapes, or unchanged when disabled
        """

        if not self.enabled or not text:
            return text

        colored = highlight(text, self.lexer, self.formatter)

        if not text.endswith('\n') and colored.endswith('\n'):
            colored = colored[:-1]

        return colored
