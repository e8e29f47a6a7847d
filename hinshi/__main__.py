import sys

from hinshi.cli import main

sys.exit(main())
