"""Constants used throughout Amplify-Config."""

from enum import Enum


# GraphQL authorization modes
class AuthMode(str, Enum):
    """Default authorization modes for the GraphQL API client.

    Attributes:
        API_KEY: API key authorization
        IAM: AWS IAM (SigV4) authorization
        USER_POOL: Cognito user pool token authorization
        OIDC: OpenID Connect token authorization
        NONE: No authorization
        LAMBDA: Custom Lambda authorizer
    """

    API_KEY = "apiKey"
    IAM = "iam"
    USER_POOL = "userPool"
    OIDC = "oidc"
    NONE = "none"
    LAMBDA = "lambda"


# Legacy `aws_appsync_authenticationType` values
LEGACY_AUTH_TYPE_MAPPING: dict[str, AuthMode] = {
    "API_KEY": AuthMode.API_KEY,
    "AWS_IAM": AuthMode.IAM,
    "AMAZON_COGNITO_USER_POOLS": AuthMode.USER_POOL,
    "OPENID_CONNECT": AuthMode.OIDC,
    "NONE": AuthMode.NONE,
    "AWS_LAMBDA": AuthMode.LAMBDA,
    # Incorrect alias shipped by earlier client releases; existing configs rely on it.
    "LAMBDA": AuthMode.LAMBDA,
}

DEFAULT_AUTH_MODE = AuthMode.IAM

# The only key a legacy config must carry
REQUIRED_LEGACY_KEY = "aws_project_region"

# Legacy list tokens
MFA_TYPE_TOTP = "TOTP"
MFA_TYPE_SMS = "SMS"

USERNAME_ATTRIBUTE_EMAIL = "EMAIL"
USERNAME_ATTRIBUTE_PHONE = "PHONE_NUMBER"

PASSWORD_REQUIRES_LOWERCASE = "REQUIRES_LOWERCASE"
PASSWORD_REQUIRES_UPPERCASE = "REQUIRES_UPPERCASE"
PASSWORD_REQUIRES_NUMBERS = "REQUIRES_NUMBERS"
PASSWORD_REQUIRES_SYMBOLS = "REQUIRES_SYMBOLS"

MANDATORY_SIGN_IN_ENABLED = "enable"

REDIRECT_URL_SEPARATOR = ","

# Output sections, in emission order
SECTION_ANALYTICS = "Analytics"
SECTION_NOTIFICATIONS = "Notifications"
SECTION_INTERACTIONS = "Interactions"
SECTION_API = "API"
SECTION_AUTH = "Auth"
SECTION_STORAGE = "Storage"
SECTION_GEO = "Geo"
SECTION_PREDICTIONS = "Predictions"

RESOURCE_SECTIONS = (
    SECTION_ANALYTICS,
    SECTION_NOTIFICATIONS,
    SECTION_INTERACTIONS,
    SECTION_API,
    SECTION_AUTH,
    SECTION_STORAGE,
    SECTION_GEO,
    SECTION_PREDICTIONS,
)

# JSON output formatting
JSON_OUTPUT_INDENT = 2

# Settings file
SETTINGS_ENV_VAR = "AMPLIFY_CONFIG_SETTINGS"
DEFAULT_SETTINGS_PATH = "~/.config/amplify-config/settings.toml"

# Logging configuration
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
