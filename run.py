#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four against the minimax computer

Usage:
    python run.py play --mode hard --depth 6
    python run.py analyze --moves 3,3,4 --depth 4
    python run.py benchmark --iterations 500
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect4_minimax.interfaces.cli import main


if __name__ == "__main__":
    sys.exit(main())
