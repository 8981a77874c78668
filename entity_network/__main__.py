import sys

from entity_network.cli import main

sys.exit(main())
