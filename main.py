import sys

from jamo_search.cli import main


if __name__ == "__main__":
    sys.exit(main())
