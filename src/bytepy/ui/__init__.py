"""
UI package for the interactive command shell.

This package implements the line oriented shell that reads commands, runs
them against the editing engine and prints the results, along with the
static help and template reference texts.
"""

from .shell import CommandShell

__all__ = ['CommandShell']
