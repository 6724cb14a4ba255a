"""Single Source of Truth sync of NAM NSX security groups from NetBox IPAM."""

import logging
from importlib import metadata

logger = logging.getLogger("nsg_ssot")
__version__ = metadata.version("ipam-nam-nsg-ssot")
