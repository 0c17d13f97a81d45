import sys

from geodist.cli import main

sys.exit(main())
