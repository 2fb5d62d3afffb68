"""Typed view over the flat legacy Amplify CLI configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

LIST_FIELDS = (
    "aws_bots_config",
    "aws_cognito_mfa_types",
    "aws_cognito_verification_mechanisms",
    "aws_cognito_signup_attributes",
    "aws_cognito_social_providers",
    "aws_cognito_username_attributes",
    "aws_cloud_logic_custom",
)

MAPPING_FIELDS = (
    "aws_cognito_password_protection_settings",
    "geo",
    "oauth",
    "predictions",
    "notifications",
)


class LegacyConfig(BaseModel):
    """Legacy configuration as generated by the Amplify CLI.

    Every field is optional. Keys not declared here are ignored, and aliased
    fields are only read under their legacy spelling. Scalar values
    are kept exactly as given; list and mapping fields holding a value of the
    wrong shape read as absent instead of failing validation.
    """

    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    # Analytics
    aws_mobile_analytics_app_id: Any = None
    aws_mobile_analytics_app_region: Any = None

    # GraphQL API
    aws_appsync_graphqlEndpoint: Any = None
    aws_appsync_customEndpoint: Any = None
    aws_appsync_apiKey: Any = None
    aws_appsync_region: Any = None
    aws_appsync_authenticationType: Any = None
    model_introspection: Any = Field(default=None, alias="modelIntrospection")

    # REST API
    aws_cloud_logic_custom: list[Any] | None = None

    # Auth
    aws_cognito_identity_pool_id: Any = None
    aws_user_pools_id: Any = None
    aws_user_pools_web_client_id: Any = None
    aws_mandatory_sign_in: Any = None
    aws_cognito_sign_up_verification_method: Any = None
    aws_cognito_mfa_configuration: Any = None
    aws_cognito_mfa_types: list[Any] | None = None
    aws_cognito_password_protection_settings: dict[str, Any] | None = None
    aws_cognito_verification_mechanisms: list[Any] | None = None
    aws_cognito_signup_attributes: list[Any] | None = None
    aws_cognito_username_attributes: list[Any] | None = None
    aws_cognito_social_providers: list[Any] | None = None
    oauth: dict[str, Any] | None = None

    # Storage
    aws_user_files_s3_bucket: Any = None
    aws_user_files_s3_bucket_region: Any = None
    aws_user_files_s3_dangerously_connect_to_http_endpoint_for_testing: Any = None

    # Geo, Predictions, Interactions, Notifications
    geo: dict[str, Any] | None = None
    predictions: dict[str, Any] | None = None
    aws_bots_config: list[Any] | None = None
    notifications: dict[str, Any] | None = Field(default=None, alias="Notifications")

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def drop_non_list(cls, v: Any) -> list[Any] | None:
        """Treat values that are not lists as absent."""
        if isinstance(v, list):
            return v
        return None

    @field_validator(*MAPPING_FIELDS, mode="before")
    @classmethod
    def drop_non_mapping(cls, v: Any) -> dict[str, Any] | None:
        """Treat values that are not mappings as absent."""
        if isinstance(v, dict):
            return v
        return None
