"""
connect_four.interfaces - User interfaces for Connect Four

This package contains the text interface for playing a game at the terminal.
"""

# Don't import anything here to avoid circular imports
__all__ = []
