"""Allow ``python -m capturechess``."""

import sys

from capturechess.app import main

sys.exit(main())
