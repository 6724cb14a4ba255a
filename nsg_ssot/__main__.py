"""Allow running the sync with `python -m nsg_ssot`."""

import sys

from nsg_ssot.cli import main

sys.exit(main())
