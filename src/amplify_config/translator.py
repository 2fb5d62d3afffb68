"""Translation of legacy Amplify CLI configuration into the resources config layout."""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from .constants import (
    DEFAULT_AUTH_MODE,
    LEGACY_AUTH_TYPE_MAPPING,
    MANDATORY_SIGN_IN_ENABLED,
    MFA_TYPE_SMS,
    MFA_TYPE_TOTP,
    PASSWORD_REQUIRES_LOWERCASE,
    PASSWORD_REQUIRES_NUMBERS,
    PASSWORD_REQUIRES_SYMBOLS,
    PASSWORD_REQUIRES_UPPERCASE,
    REQUIRED_LEGACY_KEY,
    SECTION_ANALYTICS,
    SECTION_API,
    SECTION_AUTH,
    SECTION_GEO,
    SECTION_INTERACTIONS,
    SECTION_NOTIFICATIONS,
    SECTION_PREDICTIONS,
    SECTION_STORAGE,
    USERNAME_ATTRIBUTE_EMAIL,
    USERNAME_ATTRIBUTE_PHONE,
)
from .errors import InvalidConfigError
from .legacy import LegacyConfig
from .oauth import extract_oauth_config, normalize_social_providers

logger = logging.getLogger(__name__)


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is absent."""
    return {key: value for key, value in values.items() if value is not None}


def resolve_auth_mode(authentication_type: Any, log: logging.Logger = logger) -> str:
    """
    Resolve a legacy AppSync authentication type to a GraphQL auth mode.

    Unknown or missing types resolve to IAM and are reported on ``log`` at
    DEBUG level.

    Args:
        authentication_type: Legacy `aws_appsync_authenticationType` value
        log: Logger receiving the fallback diagnostic

    Returns:
        Auth mode string, e.g. ``"apiKey"``
    """
    mode = LEGACY_AUTH_TYPE_MAPPING.get(authentication_type) if isinstance(authentication_type, str) else None
    if mode is None:
        log.debug(f"Invalid authentication type {authentication_type}. Falling back to IAM.")
        return DEFAULT_AUTH_MODE.value
    return mode.value


def build_analytics(legacy: LegacyConfig) -> dict[str, Any] | None:
    """Build the Analytics section from the mobile analytics app settings."""
    if not legacy.aws_mobile_analytics_app_id:
        return None

    return {
        "Pinpoint": _compact(
            {
                "appId": legacy.aws_mobile_analytics_app_id,
                "region": legacy.aws_mobile_analytics_app_region,
            }
        )
    }


def _build_pinpoint_channel(channel: Any) -> dict[str, Any] | None:
    """Build a `{"Pinpoint": ...}` block from a legacy notification channel."""
    if not isinstance(channel, dict):
        return None

    pinpoint = channel.get("AWSPinpoint")
    if not isinstance(pinpoint, dict):
        return None

    return {"Pinpoint": _compact({"appId": pinpoint.get("appId"), "region": pinpoint.get("region")})}


def build_notifications(legacy: LegacyConfig) -> dict[str, Any] | None:
    """Build the Notifications section.

    In-app messaging and push channels are independent sub-keys; either,
    both or neither may be present.
    """
    notifications = legacy.notifications or {}

    section: dict[str, Any] = {}

    in_app_messaging = _build_pinpoint_channel(notifications.get("InAppMessaging"))
    if in_app_messaging is not None:
        section["InAppMessaging"] = in_app_messaging

    push_notification = _build_pinpoint_channel(notifications.get("Push"))
    if push_notification is not None:
        section["PushNotification"] = push_notification

    return section or None


def build_interactions(legacy: LegacyConfig) -> dict[str, Any] | None:
    """Build the Interactions section by indexing bot definitions by name."""
    if legacy.aws_bots_config is None:
        return None

    bots = {
        bot["name"]: bot
        for bot in legacy.aws_bots_config
        if isinstance(bot, dict) and bot.get("name") is not None
    }
    return {"LexV1": bots}


def build_graphql(legacy: LegacyConfig, log: logging.Logger = logger) -> dict[str, Any] | None:
    """Build the API.GraphQL block from AppSync settings."""
    if not legacy.aws_appsync_graphqlEndpoint:
        return None

    graphql = _compact(
        {
            "endpoint": legacy.aws_appsync_graphqlEndpoint,
            "customEndpoint": legacy.aws_appsync_customEndpoint,
            "apiKey": legacy.aws_appsync_apiKey,
            "region": legacy.aws_appsync_region,
            "defaultAuthMode": resolve_auth_mode(legacy.aws_appsync_authenticationType, log),
        }
    )
    if legacy.model_introspection:
        graphql["modelIntrospection"] = legacy.model_introspection

    return graphql


def build_rest(legacy: LegacyConfig) -> dict[str, Any] | None:
    """Build the API.REST block, keyed by API name.

    `service` and `region` are only carried over when truthy.
    """
    if legacy.aws_cloud_logic_custom is None:
        return None

    rest: dict[str, Any] = {}
    for api in legacy.aws_cloud_logic_custom:
        if not isinstance(api, dict) or api.get("name") is None:
            continue

        entry = _compact({"endpoint": api.get("endpoint")})
        if api.get("service"):
            entry["service"] = api["service"]
        if api.get("region"):
            entry["region"] = api["region"]

        rest[api["name"]] = entry

    return rest


def build_api(legacy: LegacyConfig, log: logging.Logger = logger) -> dict[str, Any] | None:
    """Build the API section from its GraphQL and REST blocks."""
    section: dict[str, Any] = {}

    graphql = build_graphql(legacy, log)
    if graphql is not None:
        section["GraphQL"] = graphql

    rest = build_rest(legacy)
    if rest is not None:
        section["REST"] = rest

    return section or None


def _build_user_attributes(legacy: LegacyConfig) -> dict[str, Any]:
    # Every attribute the CLI generates is required
    merged = dict.fromkeys(
        [
            *(legacy.aws_cognito_verification_mechanisms or []),
            *(legacy.aws_cognito_signup_attributes or []),
        ]
    )
    return {str(key).lower(): {"required": True} for key in merged}


def _build_mfa(legacy: LegacyConfig) -> dict[str, Any] | None:
    if not legacy.aws_cognito_mfa_configuration:
        return None

    mfa_types = legacy.aws_cognito_mfa_types or []
    return {
        "status": str(legacy.aws_cognito_mfa_configuration).lower(),
        "totpEnabled": MFA_TYPE_TOTP in mfa_types,
        "smsEnabled": MFA_TYPE_SMS in mfa_types,
    }


def _build_password_format(legacy: LegacyConfig) -> dict[str, Any] | None:
    settings = legacy.aws_cognito_password_protection_settings
    if settings is None:
        return None

    characters = settings.get("passwordPolicyCharacters")
    if not isinstance(characters, list):
        characters = []

    return _compact(
        {
            "minLength": settings.get("passwordPolicyMinLength"),
            "requireLowercase": PASSWORD_REQUIRES_LOWERCASE in characters,
            "requireUppercase": PASSWORD_REQUIRES_UPPERCASE in characters,
            "requireNumbers": PASSWORD_REQUIRES_NUMBERS in characters,
            "requireSpecialCharacters": PASSWORD_REQUIRES_SYMBOLS in characters,
        }
    )


def _build_login_with(legacy: LegacyConfig) -> dict[str, Any]:
    username_attributes = legacy.aws_cognito_username_attributes or []
    email_enabled = USERNAME_ATTRIBUTE_EMAIL in username_attributes
    phone_enabled = USERNAME_ATTRIBUTE_PHONE in username_attributes

    login_with: dict[str, Any] = {
        "username": not (email_enabled or phone_enabled),
        "email": email_enabled,
        "phone": phone_enabled,
    }

    if legacy.oauth:
        oauth = extract_oauth_config(legacy.oauth)
        if legacy.aws_cognito_social_providers:
            oauth["providers"] = normalize_social_providers(legacy.aws_cognito_social_providers)
        login_with["oauth"] = oauth

    return login_with


def build_auth(legacy: LegacyConfig) -> dict[str, Any] | None:
    """
    Build the Auth.Cognito section.

    The section exists only when an identity pool or a user pool is
    configured. OAuth settings are attached to `loginWith` only in that case.

    Args:
        legacy: Parsed legacy config

    Returns:
        Auth section, or None when neither pool is configured
    """
    if not (legacy.aws_cognito_identity_pool_id or legacy.aws_user_pools_id):
        return None

    cognito = _compact(
        {
            "identityPoolId": legacy.aws_cognito_identity_pool_id,
            "allowGuestAccess": legacy.aws_mandatory_sign_in != MANDATORY_SIGN_IN_ENABLED,
            "signUpVerificationMethod": legacy.aws_cognito_sign_up_verification_method,
            "userAttributes": _build_user_attributes(legacy),
            "userPoolClientId": legacy.aws_user_pools_web_client_id,
            "userPoolId": legacy.aws_user_pools_id,
            "mfa": _build_mfa(legacy),
            "passwordFormat": _build_password_format(legacy),
            "loginWith": _build_login_with(legacy),
        }
    )
    return {"Cognito": cognito}


def build_storage(legacy: LegacyConfig) -> dict[str, Any] | None:
    """Build the Storage.S3 section from user file bucket settings."""
    if not legacy.aws_user_files_s3_bucket:
        return None

    return {
        "S3": _compact(
            {
                "bucket": legacy.aws_user_files_s3_bucket,
                "region": legacy.aws_user_files_s3_bucket_region,
                "dangerouslyConnectToHttpEndpointForTesting": (
                    legacy.aws_user_files_s3_dangerously_connect_to_http_endpoint_for_testing
                ),
            }
        )
    }


def build_geo(legacy: LegacyConfig) -> dict[str, Any] | None:
    """Build the Geo.LocationService section; `search_indices` becomes `searchIndices`."""
    if legacy.geo is None:
        return None

    location_service = legacy.geo.get("amazon_location_service")
    if not isinstance(location_service, dict):
        location_service = {}

    return {
        "LocationService": _compact(
            {
                "maps": location_service.get("maps"),
                "geofenceCollections": location_service.get("geofenceCollections"),
                "searchIndices": location_service.get("search_indices"),
                "region": location_service.get("region"),
            }
        )
    }


def build_predictions(legacy: LegacyConfig) -> dict[str, Any] | None:
    """
    Build the Predictions section.

    The legacy block passes through unchanged, except that a speech
    generator default `VoiceId` replaces the whole defaults object with
    `{"voiceId": ...}`.
    """
    predictions = legacy.predictions
    if predictions is None:
        return None

    convert = predictions.get("convert")
    speech_generator = convert.get("speechGenerator") if isinstance(convert, dict) else None
    defaults = speech_generator.get("defaults") if isinstance(speech_generator, dict) else None
    voice_id = defaults.get("VoiceId") if isinstance(defaults, dict) else None

    if not voice_id:
        return predictions

    return {
        **predictions,
        "convert": {
            **convert,
            "speechGenerator": {**speech_generator, "defaults": {"voiceId": voice_id}},
        },
    }


def parse_aws_exports(
    legacy_config: Mapping[str, Any] | None = None,
    log: logging.Logger = logger,
) -> dict[str, Any]:
    """
    Convert a legacy Amplify CLI config into a resources config.

    The legacy config is the object found in `aws-exports.js` or
    `amplifyconfiguration.json`. Each output section is present only when its
    legacy trigger fields are; the input is never modified and the output
    shares no mutable objects with it.

    Args:
        legacy_config: Flat legacy configuration mapping
        log: Logger receiving diagnostics (auth mode fallback)

    Returns:
        Nested resources config

    Raises:
        InvalidConfigError: If `aws_project_region` is not a key of the input
    """
    if not isinstance(legacy_config, Mapping) or REQUIRED_LEGACY_KEY not in legacy_config:
        raise InvalidConfigError()

    legacy = LegacyConfig.model_validate(copy.deepcopy(dict(legacy_config)))

    sections = {
        SECTION_ANALYTICS: build_analytics(legacy),
        SECTION_NOTIFICATIONS: build_notifications(legacy),
        SECTION_INTERACTIONS: build_interactions(legacy),
        SECTION_API: build_api(legacy, log),
        SECTION_AUTH: build_auth(legacy),
        SECTION_STORAGE: build_storage(legacy),
        SECTION_GEO: build_geo(legacy),
        SECTION_PREDICTIONS: build_predictions(legacy),
    }
    return {name: section for name, section in sections.items() if section is not None}
