import sys

# This adds the project root to the Python path.
# It allows us to run the game from the root directory and have all imports work correctly.
sys.path.insert(0, '.')

from norp.interface.cli.main import main


if __name__ == "__main__":
    """
    The main entrypoint for the norp game.
    """
    sys.exit(main())
