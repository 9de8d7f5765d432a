import sys

from maintainer_report.cli import main

sys.exit(main())
