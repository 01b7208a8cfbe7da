"""
Authentication Method Reference (AMR) values.

The catalogue follows draft-ietf-oauth-amr-values (published as RFC 8176).
Members are built once at import and the reverse lookup is a read-only
mapping derived from the members themselves.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional

from amrcatalog.config.provider import EnvConfigProvider

logger = logging.getLogger(__name__)


class InvalidAuthenticationMethodError(ValueError):
    """Raised when a non-blank string matches no known AMR code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown authentication method reference: {code!r}")


class AuthenticationMethod(str, Enum):
    """
    Closed set of authentication methods.

    The enum value is the wire code, so members compare equal to their code
    and serialize as a plain string. Each member also carries a short label
    and free-form reference text.
    """

    FACE = ("face", "Facial recognition")
    FINGERPRINT = ("fpt", "Fingerprint biometric")
    GEOLOCATION = ("geo", "Use of geolocation information")
    PROOF_OF_POSSESSION = (
        "hwk",
        "Proof-of-possession (PoP) of a hardware-secured key",
        "See https://tools.ietf.org/html/rfc4211#appendix-C",
    )
    IRIS = ("iris", "Iris scan biometric")
    KNOWLEDGE = (
        "kba",
        "Knowledge-based authentication",
        "See https://tools.ietf.org/html/draft-ietf-oauth-amr-values-04#ref-NIST.800-63-2\n"
        "See https://tools.ietf.org/html/draft-ietf-oauth-amr-values-04#ref-ISO29115",
    )
    MULTI_CHANNEL = (
        "mca",
        "Multiple-channel authentication",
        "The authentication involves\n"
        "communication over more than one distinct communication channel.\n"
        "For instance, a multiple-channel authentication might involve both\n"
        "entering information into a workstation's browser and providing\n"
        "information on a telephone call to a pre-registered number.",
    )
    MULTI_FACTOR = (
        "mfa",
        "Multiple-factor authentication",
        "Multiple-factor authentication [NIST.800-63-2],"
        "https://tools.ietf.org/html/draft-ietf-oauth-amr-values-04#ref-NIST.800-63-2\n"
        "[ISO29115], https://tools.ietf.org/html/draft-ietf-oauth-amr-values-04#ref-ISO29115.\n"
        "When this is present, specific authentication methods used may also be included.",
    )
    ONE_TIME_PASSCODE = (
        "otp",
        "One-time passcode",
        "One-time password specifications that this\n"
        "authentication method applies to include\n"
        "[RFC4226], https://tools.ietf.org/html/rfc4226 and\n"
        "[RFC6238], https://tools.ietf.org/html/rfc6238",
    )
    PIN = (
        "pin",
        "Personal Identification Number",
        "Personal Identification Number or pattern (not restricted to\n"
        "containing only numbers) that a user enters to unlock a key on the\n"
        "device.  This mechanism should have a way to deter an attacker\n"
        "from obtaining the PIN by trying repeated guesses.\n",
    )
    PASSWORD = ("pwd", "Password-based authentication")
    RISK = (
        "rba",
        "Risk-based authentication",
        "https://tools.ietf.org/html/draft-ietf-oauth-amr-values-04#ref-JECM",
    )
    RETINA = ("retina", "Retina scan biometric")

    def __new__(cls, code: str, label: str, description: str = ""):
        member = str.__new__(cls, code)
        member._value_ = code
        member._label = label
        member._description = description
        return member

    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        """Canonical wire code."""
        return self.value

    @property
    def label(self) -> str:
        """Short human-readable name."""
        return self._label

    @property
    def description(self) -> str:
        """Reference text, possibly empty."""
        return self._description

    @classmethod
    def codes(cls) -> List[str]:
        """All canonical codes in definition order."""
        return [member.value for member in cls]

    @classmethod
    def from_code(
        cls, code: Optional[str], legacy_aliases: Optional[bool] = None
    ) -> Optional["AuthenticationMethod"]:
        return from_code(code, legacy_aliases=legacy_aliases)


_BY_CODE: Mapping[str, AuthenticationMethod] = MappingProxyType(
    {member.value: member for member in AuthenticationMethod}
)

# Historical reverse lookup spelled the fingerprint code "ftp". Accepted on
# input only; output always uses the canonical "fpt".
_LEGACY_ALIASES: Mapping[str, AuthenticationMethod] = MappingProxyType(
    {"ftp": AuthenticationMethod.FINGERPRINT}
)


def code_of(method: AuthenticationMethod) -> str:
    """Return the canonical wire code of an authentication method."""
    return method.value


def from_code(
    code: Optional[str], legacy_aliases: Optional[bool] = None
) -> Optional[AuthenticationMethod]:
    """
    Convert a wire code into an AuthenticationMethod.

    Args:
        code: Wire code such as "pwd". Matching is exact and case-sensitive.
        legacy_aliases: Whether historical spellings ("ftp") are accepted.
            None defers to AMR_ACCEPT_LEGACY_ALIASES.

    Returns:
        The matching member, or None when code is None, empty or blank

    Raises:
        InvalidAuthenticationMethodError: If code is non-blank and unknown
    """
    if code is None or not code.strip():
        return None

    method = _BY_CODE.get(code)
    if method is not None:
        return method

    if code in _LEGACY_ALIASES:
        if legacy_aliases is None:
            legacy_aliases = EnvConfigProvider().get_catalog_config().accept_legacy_aliases
        if legacy_aliases:
            method = _LEGACY_ALIASES[code]
            logger.warning(
                "Accepted legacy authentication method alias %r for %r", code, method.value
            )
            return method

    logger.debug("Rejected unknown authentication method reference %r", code)
    raise InvalidAuthenticationMethodError(code)
