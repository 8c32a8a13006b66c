import sys

from cnfpy.cli import main

sys.exit(main())
