"""
Application shell: configuration-bound context and the command line.
"""

from stylekit.app_shell.context import StyleContext

__all__ = ["StyleContext"]
