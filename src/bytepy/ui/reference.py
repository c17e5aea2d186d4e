"""
Static reference texts shown by the command shell.
"""

from typing import Final

BANNER: Final[str] = """
        bytepy: A terminal based hex editor.

 Commands: (o)pen, (d)ump, (i)nspect, (e)dit, (s)earch, (c)lose and (q)uit.
 Type (h)elp for the details.
"""

HELP_TEXT: Final[str] = """
                                 Commands
-----------------------------------------------------------------------------
(o)pen $file
    Opens $file for editing. Will automatically close an already open file.

(c)lose
    Closes the open file.

(d)ump $offset $number_of_bytes
    Hex dumps $number_of_bytes of the file starting at $offset. If
    $number_of_bytes is omitted it will dump all the bytes to the end of the
    file. Offsets and lengths may be decimal or 0x prefixed hexadecimal.

(i)nspect $offset $template
    Decodes the binary data starting at $offset using the $template string.
    $template is a sequence of characters that gives the type and order of
    values to be inspected, each optionally followed by a repeat count.
    Type (t)emplate for the list of field characters. Examples:

    (1) i 32 n  - starting at offset 32 decode 2 bytes as an unsigned short
                  in big-endian format

    (2) i 16 V  - starting at offset 16 decode 4 bytes as an unsigned long
                  in little-endian format

    (3) i 0 a4N - decode a 4 byte string followed by a big-endian long

(t)emplate
    Displays the field characters that can be used in templates for the
    inspect command.

(e)dit $offset @replacement_bytes
    Starting at $offset replaces successive bytes with new values. The new
    byte values must be expressed as hexadecimal constants. For example the
    command: e 10 0x1f 0x1f will replace bytes 10 and 11 with the new values
    0x1f and 0x1f respectively.

(s)earch "$pattern"
    Searches for $pattern in the file and prints the offset of every match,
    overlapping matches included. $pattern should be enclosed within double
    quotes and may use the escapes \\xHH, \\n, \\r, \\t, \\0, \\\\ and \\".
    For example the command s "\\x66\\x6d\\x74" will search the file for the
    bytes 66 6d 74.

(h)elp
    Shows this text.

(q)uit
    Quits the program. Will automatically close an already open file.
"""

TEMPLATE_TEXT: Final[str] = """
Field characters for building templates for the inspect command. Any field
may be followed by a repeat count, e.g. n3 is three big-endian shorts and a8
is an 8 byte string.

a   a string with arbitrary binary data, null padded

c   a signed char (8-bit)
C   an unsigned char

n   an unsigned short (16-bit) big-endian
N   an unsigned long (32-bit) big-endian

v   an unsigned short (16-bit) little-endian
V   an unsigned long (32-bit) little-endian

f   a single-precision float in native format
d   a double-precision float in native format

x   a null byte
"""
