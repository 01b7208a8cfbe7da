"""
amrcatalog data-transfer models.

AuthenticationMethod values travel as their wire code only. The adapter
functions below are plain functions so they can be tested without pydantic;
AuthenticationMethodField registers them with pydantic for embedding.
"""

import logging
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer, field_validator

from amrcatalog.modules.authentication import (
    AuthenticationMethod,
    InvalidAuthenticationMethodError,
    from_code,
)

logger = logging.getLogger(__name__)


def encode_amr(method: Optional[AuthenticationMethod]) -> Optional[str]:
    """Serialize an authentication method to its wire code."""
    if method is None:
        return None
    return method.code


def decode_amr(raw: Any) -> Optional[AuthenticationMethod]:
    """
    Deserialize a wire code into an authentication method.

    Members pass through unchanged and None/blank strings map to None.
    Anything else goes through from_code, so unknown codes raise
    InvalidAuthenticationMethodError (a ValueError, which pydantic reports
    as a ValidationError).
    """
    if raw is None or isinstance(raw, AuthenticationMethod):
        return raw
    if not isinstance(raw, str):
        raise InvalidAuthenticationMethodError(str(raw))
    return from_code(raw)


AuthenticationMethodField = Annotated[
    Optional[AuthenticationMethod],
    BeforeValidator(decode_amr),
    PlainSerializer(encode_amr, return_type=Optional[str]),
]


class AuthenticationTypeHolder(BaseModel):
    """Any structure that embeds a single authentication method."""

    type: AuthenticationMethodField = Field(None, description="How the subject authenticated")


class AuthenticationMethodReferences(BaseModel):
    """The "amr" claim of an OpenID Connect ID token."""

    amr: List[AuthenticationMethodField] = Field(
        default_factory=list, description="Authentication methods used, in order"
    )

    @field_validator("amr", mode="before")
    @classmethod
    def coerce_single_value(cls, v):
        """Accept a bare string as a one-element claim."""
        if v is None:
            return []
        if isinstance(v, (str, AuthenticationMethod)):
            return [v]
        return v

    @field_validator("amr")
    @classmethod
    def drop_blank_and_duplicates(cls, v):
        """Remove blank entries and repeated methods, keeping first occurrence."""
        seen = []
        for method in v:
            if method is not None and method not in seen:
                seen.append(method)
        return seen


def amr_from_claims(claims: Dict[str, Any]) -> List[AuthenticationMethod]:
    """
    Extract authentication methods from validated token claims.

    Args:
        claims: Claims of an already-validated token

    Returns:
        Methods listed in the "amr" claim, empty if the claim is absent

    Raises:
        InvalidAuthenticationMethodError: If the claim names an unknown code
    """
    raw = claims.get("amr")
    if raw is None:
        return []

    if isinstance(raw, str):
        raw = [raw]

    methods: List[AuthenticationMethod] = []
    for entry in raw:
        method = decode_amr(entry)
        if method is not None and method not in methods:
            methods.append(method)

    logger.debug("Extracted amr claim %s for subject %s", [m.code for m in methods], claims.get("sub"))
    return methods
