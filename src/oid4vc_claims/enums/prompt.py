# -*- encoding: utf-8 -*-
"""
Prompt - values of the OpenID Connect `prompt` request parameter.

A closed set built once at import time. Members are looked up by integer
value or by their wire name, and a set of prompts converts losslessly to
and from an integer bit mask where bit i stands for the member whose
value is i.

    NONE            0  "none"
    LOGIN           1  "login"
    CONSENT         2  "consent"
    SELECT_ACCOUNT  3  "select_account"
    CREATE          4  "create"
"""

from enum import IntEnum
from typing import Iterable, Optional


class Prompt(IntEnum):
    """
    OpenID Connect prompt value.

    IntEnum keeps members ordered and comparable by value.
    """
    NONE = 0
    LOGIN = 1
    CONSENT = 2
    SELECT_ACCOUNT = 3
    CREATE = 4

    @property
    def wire_name(self) -> str:
        """Name of the prompt as it appears in an authorization request."""
        return _PROMPT_NAMES[self]

    @classmethod
    def get_by_value(cls, value: int) -> Optional["Prompt"]:
        """
        Get the prompt with the given integer value.

        Args:
            value: Integer value of the prompt

        Returns:
            Matching Prompt, or None if no prompt has that value
        """
        for prompt in cls:
            if prompt.value == value:
                return prompt
        return None

    @classmethod
    def get_by_name(cls, name: str) -> Optional["Prompt"]:
        """
        Get the prompt with the given wire name.

        Args:
            name: Wire name, e.g. "select_account"

        Returns:
            Matching Prompt, or None if no prompt has that name
        """
        for prompt in cls:
            if prompt.wire_name == name:
                return prompt
        return None

    @classmethod
    def to_bits(cls, prompts: Iterable["Prompt"]) -> int:
        """
        Encode prompts as a bit mask.

        Duplicates collapse onto the same bit.

        Args:
            prompts: Prompts to encode

        Returns:
            Integer with bit `p.value` set for every prompt p
        """
        bits = 0
        for prompt in prompts:
            bits |= 1 << prompt.value
        return bits

    @classmethod
    def to_array(cls, bits: int) -> list["Prompt"]:
        """
        Decode a bit mask into prompts.

        Args:
            bits: Bit mask produced by to_bits()

        Returns:
            Prompts whose bit is set, in ascending value order
        """
        return [prompt for prompt in cls if bits & (1 << prompt.value)]


_PROMPT_NAMES = {
    Prompt.NONE: "none",
    Prompt.LOGIN: "login",
    Prompt.CONSENT: "consent",
    Prompt.SELECT_ACCOUNT: "select_account",
    Prompt.CREATE: "create",
}
