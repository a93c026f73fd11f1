import sys

from config_watcher.cli import main

if __name__ == "__main__":
    sys.exit(main())
