import sys

from trendline.cli.main import main

sys.exit(main())
