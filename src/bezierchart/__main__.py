import sys

from bezierchart.app.main import main

if __name__ == "__main__":
    sys.exit(main())
