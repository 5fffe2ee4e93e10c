import sys

from modelpick.cli import main

sys.exit(main())
