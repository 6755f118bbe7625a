import sys

from glide_registry.cli import main

sys.exit(main())
