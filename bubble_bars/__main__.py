import sys

from bubble_bars.main import main

sys.exit(main())
