"""Module entry point for `python -m action_sequence_checker`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
