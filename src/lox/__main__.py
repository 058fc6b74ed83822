import sys

from lox.cli import main

sys.exit(main())
