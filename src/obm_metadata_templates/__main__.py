"""Module entry point for `python -m obm_metadata_templates`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
