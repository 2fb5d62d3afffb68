"""OAuth helpers for the Cognito section of the resources config."""

from typing import Any

from .constants import REDIRECT_URL_SEPARATOR


def split_redirect_urls(value: Any) -> list[str]:
    """
    Split a comma-separated legacy redirect string into URLs.

    Args:
        value: Legacy `redirectSignIn` / `redirectSignOut` value

    Returns:
        List of URLs, or an empty list when the value is absent
    """
    if not isinstance(value, str):
        return []
    return value.split(REDIRECT_URL_SEPARATOR)


def extract_oauth_config(oauth: dict[str, Any]) -> dict[str, Any]:
    """
    Map a legacy `oauth` block onto the resources config OAuth layout.

    `scope` is renamed to `scopes` and kept as is. Redirect strings are split
    on commas. Absent domain, scopes or response type are left out.

    Args:
        oauth: Legacy `oauth` mapping

    Returns:
        OAuth config mapping
    """
    config: dict[str, Any] = {
        "domain": oauth.get("domain"),
        "scopes": oauth.get("scope"),
        "redirectSignIn": split_redirect_urls(oauth.get("redirectSignIn")),
        "redirectSignOut": split_redirect_urls(oauth.get("redirectSignOut")),
        "responseType": oauth.get("responseType"),
    }
    return {key: value for key, value in config.items() if value is not None}


def _normalize_provider(provider: Any) -> Any:
    if not isinstance(provider, str):
        return provider
    # Upper-case, not title-case, the first character
    return provider[:1].upper() + provider[1:].lower()


def normalize_social_providers(providers: list[Any]) -> list[Any]:
    """Title-case legacy provider names, e.g. ``GOOGLE`` -> ``Google``.

    Entries that are not strings are kept as they are.
    """
    return [_normalize_provider(provider) for provider in providers]
