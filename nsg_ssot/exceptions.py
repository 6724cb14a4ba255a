"""Custom Exceptions used by the IPAM to NAM security group SSoT."""


class ConfigurationMissing(Exception):
    """Exception raised when an expected custom field, choice set or setting is missing.

    Attributes:
        message (str): Returned explanation of Error.
    """

    def __init__(self, setting):
        """Initialize Exception with Setting that is missing and message."""
        self.setting = setting
        self.message = f"Missing configuration - {setting}!"
        super().__init__(self.message)


class UpstreamFetchFailure(Exception):
    """Exception raised when reading from IPAM or NAM fails."""

    def __init__(self, system, message):
        """Populate exception information."""
        self.system = system
        self.message = message
        super().__init__(f"{system}: {message}")


class UpstreamWriteFailure(Exception):
    """Exception raised when creating or patching a security group in NAM fails."""

    def __init__(self, system, message):
        """Populate exception information."""
        self.system = system
        self.message = message
        super().__init__(f"{system}: {message}")


class PerKeyFailure(Exception):
    """Failure scoped to a single grouping key.

    Recorded on the Sync rather than raised, so the remaining keys of the run are still processed.
    """

    def __init__(self, key, error):
        """Populate exception information."""
        self.key = key
        self.error = error
        self.message = getattr(error, "message", None) or str(error)
        super().__init__(f"{key}: {self.message}")
