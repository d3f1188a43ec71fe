"""Speedwire user names and credentials for device login."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar


class UserName(IntEnum):
    """User names granting access to devices with different permissions."""

    USER = 0x7
    INSTALLER = 0xA


@dataclass(frozen=True)
class Credentials:
    """A user name together with its password."""

    user_name: UserName | int
    password: str


# Factory default passwords of the devices.
_FACTORY_DEFAULTS = {
    UserName.USER: "0000",
    UserName.INSTALLER: "1111",
}


class CredentialsMap:
    """Passwords by user name, with a default user shared by all maps."""

    _default_user_name: ClassVar[UserName] = UserName.USER

    def __init__(self) -> None:
        self._entries: dict[UserName | int, str] = {}
        for name, secret_value in _FACTORY_DEFAULTS.items():
            self.add(name, secret_value)

    def add(self, name: UserName | int, password: str) -> None:
        """Store the password for the user name, replacing any previous one."""
        self._entries[name] = password

    def get(self, name: UserName | int) -> Credentials:
        """Credentials of the user; the password is empty if none is stored."""
        return Credentials(name, self._entries.get(name, ""))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def default_user_name(cls) -> UserName:
        """The user name used by default_credentials()."""
        return cls._default_user_name

    @classmethod
    def set_default_user_name(cls, name: UserName) -> None:
        """Change the user name used by default_credentials()."""
        cls._default_user_name = UserName(name)

    def default_credentials(self) -> Credentials:
        """Credentials of the default user."""
        return self.get(type(self)._default_user_name)