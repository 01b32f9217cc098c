import sys

from commit_header.cli import main

sys.exit(main())
