import sys

from milu.cli import main

sys.exit(main())
