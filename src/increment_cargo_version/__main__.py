import sys

from increment_cargo_version.app import main

if __name__ == "__main__":
    sys.exit(main())
