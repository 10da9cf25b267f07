"""File types, permission bits and the status record describing a file."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class FileType(enum.IntEnum):
    """Kind of file a status describes."""

    STATUS_ERROR = 0
    STATUS_UNKNOWN = 0  # older name for STATUS_ERROR
    FILE_NOT_FOUND = 1
    REGULAR_FILE = 2
    DIRECTORY_FILE = 3
    # the following may not apply to some operating systems or file systems
    SYMLINK_FILE = 4
    BLOCK_FILE = 5
    CHARACTER_FILE = 6
    FIFO_FILE = 7
    SOCKET_FILE = 8
    REPARSE_FILE = 9  # a Windows reparse point that is not a symlink
    TYPE_UNKNOWN = 10  # exists, but of no known type or not permitted to find out


class Perms(enum.IntFlag):
    """POSIX permission bits plus options for changing them."""

    NO_PERMS = 0

    OWNER_READ = 0o400
    OWNER_WRITE = 0o200
    OWNER_EXE = 0o100
    OWNER_ALL = 0o700

    GROUP_READ = 0o40
    GROUP_WRITE = 0o20
    GROUP_EXE = 0o10
    GROUP_ALL = 0o70

    OTHERS_READ = 0o4
    OTHERS_WRITE = 0o2
    OTHERS_EXE = 0o1
    OTHERS_ALL = 0o7

    ALL_ALL = 0o777

    SET_UID_ON_EXE = 0o4000
    SET_GID_ON_EXE = 0o2000
    STICKY_BIT = 0o1000

    PERMS_MASK = 0o7777

    PERMS_NOT_KNOWN = 0xFFFF

    # options for changing permissions
    ADD_PERMS = 0x1000
    REMOVE_PERMS = 0x2000
    SYMLINK_PERMS = 0x4000


class CopyOption(enum.Enum):
    """What copying a file does when the target already exists."""

    NONE = 0
    FAIL_IF_EXISTS = 0
    OVERWRITE_IF_EXISTS = 1


class SymlinkOption(enum.IntFlag):
    """How recursive directory iteration treats directory symlinks."""

    NONE = 0
    NO_RECURSE = 0
    RECURSE = 1
    NO_PUSH = 2  # used by the iterator itself to skip recursing once


@dataclass(frozen=True)
class SpaceInfo:
    """Byte counts describing a file system's space."""

    capacity: int
    free: int
    available: int


@dataclass
class FileStatus:
    """The type and permissions of a file."""

    type: FileType = FileType.STATUS_ERROR
    permissions: Perms = Perms.PERMS_NOT_KNOWN

    def type_present(self) -> bool:
        """True unless the type could not be determined."""
        return self.type != FileType.STATUS_ERROR

    def permissions_present(self) -> bool:
        """True when the permissions are known."""
        return self.permissions != Perms.PERMS_NOT_KNOWN

    def status_known(self) -> bool:
        """True when both type and permissions are known."""
        return self.type_present() and self.permissions_present()

    def exists(self) -> bool:
        """True when the status describes an existing file."""
        return self.type not in (FileType.STATUS_ERROR, FileType.FILE_NOT_FOUND)

    def is_regular_file(self) -> bool:
        return self.type == FileType.REGULAR_FILE

    def is_directory(self) -> bool:
        return self.type == FileType.DIRECTORY_FILE

    def is_symlink(self) -> bool:
        return self.type == FileType.SYMLINK_FILE

    def is_other(self) -> bool:
        """True for an existing file that is not regular, a directory or a symlink."""
        return (
            self.exists()
            and not self.is_regular_file()
            and not self.is_directory()
            and not self.is_symlink()
        )