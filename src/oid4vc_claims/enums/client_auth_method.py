# -*- encoding: utf-8 -*-
"""
ClientAuthMethod - OAuth 2.0 client authentication methods.

Each method carries a set of classification flags telling whether it
relies on a shared secret, on a signed JWT, or on a client certificate.
The flags are an IntFlag and are tested with bitwise AND.
"""

from enum import IntEnum, IntFlag
from typing import Any, Optional


class AuthMethodFlag(IntFlag):
    """Classification flags for client authentication methods."""
    NONE = 0
    SECRET_BASED = 1
    JWT_BASED = 2
    CERTIFICATE_BASED = 4


class ClientAuthMethod(IntEnum):
    """Client authentication method, e.g. client_secret_basic."""
    NONE = 0
    CLIENT_SECRET_BASIC = 1
    CLIENT_SECRET_POST = 2
    CLIENT_SECRET_JWT = 3
    PRIVATE_KEY_JWT = 4
    TLS_CLIENT_AUTH = 5
    SELF_SIGNED_TLS_CLIENT_AUTH = 6
    ATTEST_JWT_CLIENT_AUTH = 7

    @property
    def wire_name(self) -> str:
        """Name used in client metadata (token_endpoint_auth_method)."""
        return _METHOD_NAMES[self]

    @property
    def flags(self) -> AuthMethodFlag:
        """Classification flags of this method."""
        return _METHOD_FLAGS[self]

    @property
    def is_secret_based(self) -> bool:
        """True for client_secret_basic and client_secret_post."""
        return (self.flags & AuthMethodFlag.SECRET_BASED) != 0

    @property
    def is_jwt_based(self) -> bool:
        """True for methods authenticating with a signed JWT."""
        return (self.flags & AuthMethodFlag.JWT_BASED) != 0

    @property
    def is_certificate_based(self) -> bool:
        """True for the mutual-TLS methods."""
        return (self.flags & AuthMethodFlag.CERTIFICATE_BASED) != 0

    @classmethod
    def get_by_value(cls, value: int) -> Optional["ClientAuthMethod"]:
        """Get the method with the given integer value, or None."""
        for method in cls:
            if method.value == value:
                return method
        return None

    @classmethod
    def get_by_name(cls, name: str) -> Optional["ClientAuthMethod"]:
        """Get the method with the given wire name, or None."""
        for method in cls:
            if method.wire_name == name:
                return method
        return None

    def describe(self) -> str:
        """One-line description including the classification flags."""
        return (
            f"{{name={self.wire_name}, value={self.value}, "
            f"isSecretBased={_js_bool(self.is_secret_based)}, "
            f"isJwtBased={_js_bool(self.is_jwt_based)}, "
            f"isCertificateBased={_js_bool(self.is_certificate_based)}}}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.wire_name,
            "value": self.value,
            "secret_based": self.is_secret_based,
            "jwt_based": self.is_jwt_based,
            "certificate_based": self.is_certificate_based,
        }


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


_METHOD_NAMES = {
    ClientAuthMethod.NONE: "none",
    ClientAuthMethod.CLIENT_SECRET_BASIC: "client_secret_basic",
    ClientAuthMethod.CLIENT_SECRET_POST: "client_secret_post",
    ClientAuthMethod.CLIENT_SECRET_JWT: "client_secret_jwt",
    ClientAuthMethod.PRIVATE_KEY_JWT: "private_key_jwt",
    ClientAuthMethod.TLS_CLIENT_AUTH: "tls_client_auth",
    ClientAuthMethod.SELF_SIGNED_TLS_CLIENT_AUTH: "self_signed_tls_client_auth",
    ClientAuthMethod.ATTEST_JWT_CLIENT_AUTH: "attest_jwt_client_auth",
}

_METHOD_FLAGS = {
    ClientAuthMethod.NONE: AuthMethodFlag.NONE,
    ClientAuthMethod.CLIENT_SECRET_BASIC: AuthMethodFlag.SECRET_BASED,
    ClientAuthMethod.CLIENT_SECRET_POST: AuthMethodFlag.SECRET_BASED,
    ClientAuthMethod.CLIENT_SECRET_JWT: AuthMethodFlag.JWT_BASED,
    ClientAuthMethod.PRIVATE_KEY_JWT: AuthMethodFlag.JWT_BASED,
    ClientAuthMethod.TLS_CLIENT_AUTH: AuthMethodFlag.CERTIFICATE_BASED,
    ClientAuthMethod.SELF_SIGNED_TLS_CLIENT_AUTH: AuthMethodFlag.CERTIFICATE_BASED,
    ClientAuthMethod.ATTEST_JWT_CLIENT_AUTH: AuthMethodFlag.JWT_BASED,
}
