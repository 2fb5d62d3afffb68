"""Exceptions raised by Amplify-Config."""


class AmplifyConfigError(Exception):
    """
    Base error for configuration translation failures.

    Carries a machine-readable name, a human-readable message and a
    recovery suggestion that callers can surface to users.
    """

    def __init__(self, name: str, message: str, recovery_suggestion: str | None = None):
        super().__init__(message)
        self.name = name
        self.message = message
        self.recovery_suggestion = recovery_suggestion

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, message={self.message!r})"


class InvalidConfigError(AmplifyConfigError):
    """Raised when the legacy config lacks the required `aws_project_region` key."""

    def __init__(self) -> None:
        super().__init__(
            name="InvalidParameterException",
            message="Invalid config parameter.",
            recovery_suggestion="Ensure passing the config object imported from `amplifyconfiguration.json`.",
        )
