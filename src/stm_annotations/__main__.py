"""Entry point for ``python -m stm_annotations``."""

from stm_annotations.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
