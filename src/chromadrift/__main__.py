import sys

from chromadrift.cli import main

sys.exit(main())
