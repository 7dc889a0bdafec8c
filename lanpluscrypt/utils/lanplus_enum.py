#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2026 lanpluscrypt developers
#
# SPDX-License-Identifier: BSD-3-Clause

"""Enumeration base class with numeric tag, label and description members.

IPMI identifies algorithms by small numeric codes on the wire, while logs and
configuration refer to them by name. Members of ``LanplusEnum`` carry both.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from typing_extensions import Self

from lanpluscrypt.exceptions import LanplusKeyError, LanplusTypeError


@dataclass(frozen=True)
class LanplusEnumMember:
    """lanpluscrypt Enum member representation."""

    tag: int
    label: str
    description: Optional[str] = None


class LanplusEnum(LanplusEnumMember, Enum):
    """Enumeration whose members compare equal to their tag or their label.

    Lookup helpers accept either form, which lets a caller pass the numeric
    code parsed from a packet or a name taken from configuration.
    """

    def __eq__(self, __value: object) -> bool:
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

    @classmethod
    def tags(cls) -> list[int]:
        """Get list of tags of all enum members.

        :return: List of all tags.
        """
        return [value.tag for value in cls.__members__.values()]

    @classmethod
    def contains(cls, obj: Union[int, str]) -> bool:
        """Check if member with given tag/label exists in enum.

        :param obj: Label or tag of enum member to check for existence.
        :raises LanplusTypeError: Object must be either string or integer.
        :return: True if member exists, False otherwise.
        """
        if not isinstance(obj, (int, str)):
            raise LanplusTypeError("Object must be either string or integer")
        try:
            cls.from_attr(obj)
            return True
        except LanplusKeyError:
            return False

    @classmethod
    def from_attr(cls, attribute: Union[int, str]) -> Self:
        """Get enum member with given tag (int) or label (str).

        :param attribute: Tag value or label value of the enum member to find.
        :return: Found enum member matching the given attribute.
        """
        from_tag: Callable = cls.from_tag
        from_label: Callable = cls.from_label
        from_method: Callable = from_tag if isinstance(attribute, int) else from_label
        return from_method(attribute)

    @classmethod
    def from_tag(cls, tag: int) -> Self:
        """Get enum member with given tag.

        :param tag: Tag to be used for searching
        :raises LanplusKeyError: If enum with given tag is not found
        :return: Found enum member
        """
        for item in cls.__members__.values():
            if item.tag == tag:
                return item
        raise LanplusKeyError(f"There is no {cls.__name__} item with tag {tag} defined")

    @classmethod
    def from_label(cls, label: str) -> Self:
        """Get enum member with given label, case-insensitive.

        :param label: Label to be used for searching
        :raises LanplusKeyError: If enum with given label is not found or label is not string
        :return: Found enum member
        """
        if not isinstance(label, str):
            raise LanplusKeyError("Label must be string")
        for item in cls.__members__.values():
            if item.label.upper() == label.upper():
                return item
        raise LanplusKeyError(f"There is no {cls.__name__} item with label {label} defined")
