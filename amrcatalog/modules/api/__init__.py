"""
API Module - Black Box Interface

Purpose: Serialize AMR values as their wire code
Interface: encode_amr(), decode_amr(), AuthenticationMethodField, amr_from_claims()
Hidden: pydantic validator and serializer wiring

Any pydantic model can embed AuthenticationMethodField as a plain scalar field.
"""

from .models import (
    AuthenticationMethodField,
    AuthenticationMethodReferences,
    AuthenticationTypeHolder,
    amr_from_claims,
    decode_amr,
    encode_amr,
)

__all__ = [
    "AuthenticationMethodField",
    "AuthenticationMethodReferences",
    "AuthenticationTypeHolder",
    "amr_from_claims",
    "decode_amr",
    "encode_amr",
]
