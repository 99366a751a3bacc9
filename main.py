#!/usr/bin/env python3
"""
Minesweepers - Main entry point.

Usage:
    python main.py [--size N] [--mines N] [--seed N] [--log-level LEVEL]
"""
from src.minesweepers.console import main


if __name__ == "__main__":
    main()
