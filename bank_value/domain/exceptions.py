"""
Domain exceptions for the Bank Value panel.

Distinguishes recoverable runtime errors (an unreadable bank snapshot, the
previous items stay on screen) from fatal errors (configuration issues) that
abort startup.
"""

class BankValueError(Exception):
    """Base class for all Bank Value exceptions."""
    pass


class RecoverableError(BankValueError):
    """
    Errors the panel can recover from without restarting.

    Examples:
    - Snapshot file temporarily missing while being rewritten
    - Malformed item entry in a snapshot
    """
    pass


class FatalError(BankValueError):
    """
    Critical errors requiring shutdown or operator intervention.

    Examples:
    - Invalid configuration
    - Missing required config files
    """
    pass


class SnapshotError(RecoverableError):
    """Bank snapshot could not be read or parsed."""
    pass


class ConfigurationError(FatalError):
    """Invalid application configuration."""
    pass
