import sys

from swiftsearch.cli import main

sys.exit(main())
