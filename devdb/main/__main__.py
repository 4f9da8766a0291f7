"""Run the DevDB server with ``python -m devdb.main``."""

from .server import main

if __name__ == "__main__":
    main()
