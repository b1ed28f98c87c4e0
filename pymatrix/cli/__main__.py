import sys

from pymatrix.cli.main import main

sys.exit(main())
