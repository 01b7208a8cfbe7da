"""
amrcatalog - Authentication Method Reference vocabulary

A closed catalogue of the standardized AMR codes used to annotate how a
subject authenticated (password, one-time passcode, biometrics, ...).

Architecture:
- Each module is self-contained with a clear interface
- The catalogue itself is immutable and built once at import
- Serialization goes through explicit adapter functions

Modules:
- authentication: The AuthenticationMethod enumeration and code lookup
- api: Serialization adapters and data-transfer models
"""

from amrcatalog.modules.authentication import (
    AuthenticationMethod,
    InvalidAuthenticationMethodError,
    code_of,
    from_code,
)

__version__ = "1.0.0"

__all__ = [
    "AuthenticationMethod",
    "InvalidAuthenticationMethodError",
    "code_of",
    "from_code",
]
