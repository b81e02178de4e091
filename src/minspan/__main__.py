import sys

from minspan.cli import main


sys.exit(main())
