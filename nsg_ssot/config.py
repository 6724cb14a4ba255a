"""Runtime configuration for the IPAM to NAM security group SSoT."""

import logging.config
import os
from dataclasses import dataclass
from typing import Optional

from nsg_ssot.constants import DEFAULT_TIMEOUT
from nsg_ssot.exceptions import ConfigurationMissing


def is_truthy(arg):
    """Convert "truthy" strings into Booleans.

    Examples:
        >>> is_truthy('yes')
        True

    Args:
        arg (str): Truthy string (True values are y, yes, t, true, on and 1; false values are n, no,
        f, false, off and 0. Raises ValueError if val is anything else.
    """
    if isinstance(arg, bool):
        return arg

    val = str(arg).lower()
    if val in ("y", "yes", "t", "true", "on", "1"):
        return True
    if val in ("n", "no", "f", "false", "off", "0"):
        return False
    raise ValueError(f"Invalid truthy value: `{arg}`")


@dataclass
class Settings:  # pylint: disable=too-many-instance-attributes
    """Connection and behaviour settings, read from `NSG_SSOT_*` environment variables."""

    ipam_url: Optional[str] = None
    ipam_token: Optional[str] = None
    ipam_verify_ssl: bool = True
    nam_url: Optional[str] = None
    nam_token: Optional[str] = None
    nam_verify_ssl: bool = True
    timeout: float = DEFAULT_TIMEOUT
    enabled: bool = True
    dryrun: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None):
        """Build settings from the environment."""
        environ = os.environ if environ is None else environ
        return cls(
            ipam_url=environ.get("NSG_SSOT_IPAM_URL"),
            ipam_token=environ.get("NSG_SSOT_IPAM_TOKEN"),
            ipam_verify_ssl=is_truthy(environ.get("NSG_SSOT_IPAM_VERIFY_SSL", "true")),
            nam_url=environ.get("NSG_SSOT_NAM_URL"),
            nam_token=environ.get("NSG_SSOT_NAM_TOKEN"),
            nam_verify_ssl=is_truthy(environ.get("NSG_SSOT_NAM_VERIFY_SSL", "true")),
            timeout=float(environ.get("NSG_SSOT_TIMEOUT", DEFAULT_TIMEOUT)),
            enabled=is_truthy(environ.get("NSG_SSOT_ENABLED", "true")),
            dryrun=is_truthy(environ.get("NSG_SSOT_DRYRUN", "false")),
            debug=is_truthy(environ.get("NSG_SSOT_DEBUG", "false")),
        )

    def validate(self):
        """Ensure the connection settings for both systems are present."""
        for setting in ("ipam_url", "ipam_token", "nam_url", "nam_token"):
            if not getattr(self, setting):
                raise ConfigurationMissing(f"NSG_SSOT_{setting.upper()}")


def get_logging_config(debug=False):
    """Return the `logging.config.dictConfig` schema used by the command line entry point."""
    log_level = "DEBUG" if debug else "INFO"
    handler = "verbose_console" if debug else "normal_console"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "normal": {
                "format": "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s : %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "verbose": {
                "format": "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)-20s %(filename)-15s %(funcName)30s() : %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "normal_console": {
                "level": "INFO",
                "class": "logging.StreamHandler",
                "formatter": "normal",
            },
            "verbose_console": {
                "level": "DEBUG",
                "class": "logging.StreamHandler",
                "formatter": "verbose",
            },
        },
        "loggers": {
            "diffsync": {"handlers": [handler], "level": log_level},
            "nsg_ssot": {"handlers": [handler], "level": log_level},
            "httpx": {"handlers": ["normal_console"], "level": "WARNING"},
        },
    }


def configure_logging(debug=False):
    """Apply the logging configuration."""
    logging.config.dictConfig(get_logging_config(debug))
