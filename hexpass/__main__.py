"""
hexpass Module Entry Point
===========================

Allows running the hexpass CLI via: python -m hexpass
"""

from hexpass.cli import main

if __name__ == "__main__":
    main()
