import sys

from tick_maze.cli import main

sys.exit(main())
