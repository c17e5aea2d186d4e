"""
bytepy - a terminal based hex editor.
"""

__version__ = "0.1.0"
