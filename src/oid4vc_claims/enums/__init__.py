# -*- encoding: utf-8 -*-
"""
Enumerated value sets used by authorization and client authentication flows.
"""

from .prompt import Prompt
from .client_auth_method import AuthMethodFlag, ClientAuthMethod

__all__ = [
    "Prompt",
    "AuthMethodFlag",
    "ClientAuthMethod",
]
