#!/usr/bin/env python3
"""
Main entry point for the Subber sideline tracker web application.

This script launches the Flask-based web server. Run with --help for options.
"""
import sys
import os

# Allow running from a source checkout without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from subber.cli import main

if __name__ == "__main__":
    main()
