import sys

from touchcal.cli import main

sys.exit(main())
