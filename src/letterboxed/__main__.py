"""Main entry point for the Letter Boxed solver, run as `python -m letterboxed`."""

from letterboxed import main

main()
