import sys

from trimindent.cli import main

sys.exit(main())
