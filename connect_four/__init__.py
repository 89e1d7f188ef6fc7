"""
connect_four - Two-player Connect Four played through a text interface

This package provides the board representation, the rule engine that
enforces gravity drops, turn order and win/draw detection, and a simple
command-line driver.
"""

# Version number
__version__ = '0.1.0'
