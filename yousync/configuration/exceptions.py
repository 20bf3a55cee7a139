"""Contains exceptions raised when reconciling application configuration."""

from yousync.synchronize.exceptions import YouSyncError


class CredentialsUndefinedError(YouSyncError):
    """Raised when a token is neither configured nor entered at the prompt."""

    def __init__(self, name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing credential."""
        super().__init__(f"No {name} provided. Set {env_name} or enter it at the prompt.")
        self.name = name
        self.env_name = env_name


class RequiredConfigurationElementError(YouSyncError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name}")
        self.name = name
        self.cli_name = cli_name


class InvalidConfigurationElementError(YouSyncError):
    """Raised when a configuration element has an unusable value."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        """Initializes the exception with the offending element and value."""
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")
        self.name = name
        self.value = value
        self.reason = reason
