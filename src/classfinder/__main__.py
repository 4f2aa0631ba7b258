import sys

from classfinder.cli import main

sys.exit(main())
