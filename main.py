import sys
from avwx_pack.cli import main

if __name__ == "__main__":
    sys.exit(main())
