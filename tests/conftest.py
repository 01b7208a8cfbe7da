"""
Shared pytest fixtures for amrcatalog tests.

This module provides common fixtures including:
- Environment patching for the catalogue configuration
- The full list of catalogue members with their expected wire codes
"""

import os
import sys
from typing import Dict, Iterator
from unittest.mock import patch

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from amrcatalog.modules.authentication import AuthenticationMethod


# =============================================================================
# Catalogue Data
# =============================================================================

EXPECTED_CODES: Dict[AuthenticationMethod, str] = {
    AuthenticationMethod.FACE: "face",
    AuthenticationMethod.FINGERPRINT: "fpt",
    AuthenticationMethod.GEOLOCATION: "geo",
    AuthenticationMethod.PROOF_OF_POSSESSION: "hwk",
    AuthenticationMethod.IRIS: "iris",
    AuthenticationMethod.KNOWLEDGE: "kba",
    AuthenticationMethod.MULTI_CHANNEL: "mca",
    AuthenticationMethod.MULTI_FACTOR: "mfa",
    AuthenticationMethod.ONE_TIME_PASSCODE: "otp",
    AuthenticationMethod.PIN: "pin",
    AuthenticationMethod.PASSWORD: "pwd",
    AuthenticationMethod.RISK: "rba",
    AuthenticationMethod.RETINA: "retina",
}


@pytest.fixture
def expected_codes() -> Dict[AuthenticationMethod, str]:
    """Each member mapped to its wire code, in definition order."""
    return dict(EXPECTED_CODES)


@pytest.fixture(params=list(AuthenticationMethod), ids=lambda m: m.name)
def method(request) -> AuthenticationMethod:
    """Each catalogue member in turn."""
    return request.param


# =============================================================================
# Environment
# =============================================================================

@pytest.fixture
def legacy_aliases_enabled() -> Iterator[None]:
    """Accept legacy AMR spellings via the environment."""
    with patch.dict(os.environ, {"AMR_ACCEPT_LEGACY_ALIASES": "true"}, clear=False):
        yield


@pytest.fixture
def legacy_aliases_disabled() -> Iterator[None]:
    """Reject legacy AMR spellings via the environment."""
    with patch.dict(os.environ, {"AMR_ACCEPT_LEGACY_ALIASES": "false"}, clear=False):
        yield
