import sys

from footlights.cli import main

sys.exit(main())
