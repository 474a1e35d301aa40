import sys

from me3.cli.main import main

sys.exit(main())
