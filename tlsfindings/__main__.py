import sys

from tlsfindings.cli.main import main

sys.exit(main())
