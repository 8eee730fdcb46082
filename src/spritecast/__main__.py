"""SpriteCast command-line entry point (``python -m spritecast``)."""

from spritecast.cli import main

if __name__ == "__main__":
    main()
