#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py evaluate [--player {random,logic}] [--games N]
    python main.py compare [--games N]
"""
from minesweeper.cli import main


if __name__ == "__main__":
    main()
