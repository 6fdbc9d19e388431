#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four terminal game

Examples:
    python run.py play
    python run.py --seed 7 --debug-level info play
    python run.py benchmark --iterations 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
