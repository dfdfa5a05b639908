import sys

from raytrace.main import main

if __name__ == "__main__":
    sys.exit(main())
