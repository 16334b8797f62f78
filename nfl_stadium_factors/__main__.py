import sys

from nfl_stadium_factors.cli import main

if __name__ == "__main__":
    sys.exit(main())
