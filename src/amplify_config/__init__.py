"""Amplify-Config: translate legacy Amplify CLI configuration into the resources config layout."""

from .errors import AmplifyConfigError, InvalidConfigError
from .translator import parse_aws_exports, resolve_auth_mode

__version__ = "0.1.0"

__all__ = [
    "AmplifyConfigError",
    "InvalidConfigError",
    "parse_aws_exports",
    "resolve_auth_mode",
    "__version__",
]
