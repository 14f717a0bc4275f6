#!/usr/bin/env python3
"""
run.py - Main entry point for the dropfour Connect Four game

Examples:
    python run.py play --opponent hard
    python run.py play --opponent human --marks XO
    python run.py analyze --position ".......,.......,.......,.......,.......,XXX.OO."
    python run.py selfplay --games 50 --seed 1
"""

import sys

from dropfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
