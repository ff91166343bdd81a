"""Allow `python -m rangesum`."""

from rangesum.main import main

if __name__ == "__main__":
    raise SystemExit(main())
