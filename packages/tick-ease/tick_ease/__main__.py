import sys

from tick_ease.cli import main

sys.exit(main())
