"""Choice values for Single Source of Truth (SSoT) sync logs."""


class SyncLogEntryActionChoices:
    """Values for a SyncLogEntry.action that diffsync leaves empty."""

    ACTION_NO_CHANGE = "no-change"


class ChangeTypeChoices:
    """Change record types emitted when a security group is written to NAM."""

    TYPE_CREATE = "CREATE"
    TYPE_UPDATE = "UPDATE"
