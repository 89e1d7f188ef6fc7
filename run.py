#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Examples:

    # Play a two-player game, prompting for names
    python run.py play

    # Skip the name prompts and log engine activity to a file
    python run.py play --player1 Alice --player2 Bob --debug --log-file game.log
"""

import sys

from connect_four.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
