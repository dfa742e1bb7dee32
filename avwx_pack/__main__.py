import sys

from avwx_pack.cli import main

sys.exit(main())
