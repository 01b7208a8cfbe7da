"""
Authentication Method Module - Black Box Interface

Purpose: Define the closed set of AMR values
Interface: AuthenticationMethod, code_of(), from_code()
Hidden: Reverse-lookup table, legacy alias handling

Holders of these values (sessions, tokens, audit records) treat them as
opaque scalars and never need to know how the lookup works.
"""

from .method import (
    AuthenticationMethod,
    InvalidAuthenticationMethodError,
    code_of,
    from_code,
)

__all__ = [
    "AuthenticationMethod",
    "InvalidAuthenticationMethodError",
    "code_of",
    "from_code",
]
