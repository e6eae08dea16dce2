import sys

from tabplot.cli.main import main

sys.exit(main())
