"""
Package entry point.

Allows running the application via:

    python -m classweek

This simply forwards execution to classweek.cli.main().
"""

from classweek.cli import main

if __name__ == "__main__":
    main()
