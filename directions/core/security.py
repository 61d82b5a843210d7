from typing import Optional

# Public, secret and temporary token prefixes accepted by the directions service
ACCESS_TOKEN_PREFIXES = ("pk.", "sk.", "tk.")


def is_access_token_valid(access_token: Optional[str]) -> bool:
    """
    Check that an access token is non-empty and carries a known prefix.
    """
    if not access_token:
        return False
    return access_token.startswith(ACCESS_TOKEN_PREFIXES)


def mask_access_token(access_token: Optional[str]) -> str:
    """Hide all but the prefix of a token so it can be logged."""
    if not access_token:
        return ""
    return f"{access_token[:3]}***"
