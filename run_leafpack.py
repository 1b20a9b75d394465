"""Entry point for PyInstaller executable."""
import sys

if __name__ == "__main__":
    from leafpack.cli import main
    sys.exit(main())
