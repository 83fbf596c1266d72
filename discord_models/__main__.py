import sys

from discord_models.cli import main

if __name__ == "__main__":
    sys.exit(main())
