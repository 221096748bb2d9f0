import sys

from svg2geo.cli import main

sys.exit(main())
