import pytest

from filesys.status import (
    FileStatus,
    FileType,
    Perms,
    SpaceInfo,
)


def test_default_status_is_error_with_unknown_perms():
    s = FileStatus()
    assert s.type == FileType.STATUS_ERROR
    assert s.permissions == Perms.PERMS_NOT_KNOWN
    assert not s.type_present()
    assert not s.permissions_present()
    assert not s.status_known()
    assert not s.exists()


def test_type_only_constructor_leaves_perms_unknown():
    s = FileStatus(FileType.REGULAR_FILE)
    assert s.permissions == Perms.PERMS_NOT_KNOWN
    assert s.type_present()
    assert not s.status_known()


def test_status_known_with_both_parts():
    s = FileStatus(FileType.DIRECTORY_FILE, Perms.OWNER_ALL)
    assert s.status_known()


def test_not_found_status_equality():
    # mirrors status("no-such-file") == file_status(file_not_found, no_perms)
    s = FileStatus(FileType.FILE_NOT_FOUND, Perms.NO_PERMS)
    assert s == FileStatus(FileType.FILE_NOT_FOUND, Perms.NO_PERMS)
    assert s != FileStatus(FileType.FILE_NOT_FOUND)
    assert not s.exists()
    assert s.type_present()
    assert s.permissions_present()


def test_equality_compares_type_and_permissions():
    a = FileStatus(FileType.REGULAR_FILE, Perms.OWNER_ALL)
    assert a == FileStatus(FileType.REGULAR_FILE, Perms.OWNER_ALL)
    assert a != FileStatus(FileType.DIRECTORY_FILE, Perms.OWNER_ALL)
    assert a != FileStatus(FileType.REGULAR_FILE, Perms.GROUP_ALL)


def test_status_is_modifiable():
    s = FileStatus()
    s.type = FileType.SYMLINK_FILE
    s.permissions = Perms.ALL_ALL
    assert s == FileStatus(FileType.SYMLINK_FILE, Perms.ALL_ALL)


@pytest.mark.parametrize(
    "file_type, regular, directory, symlink, other",
    [
        (FileType.REGULAR_FILE, True, False, False, False),
        (FileType.DIRECTORY_FILE, False, True, False, False),
        (FileType.SYMLINK_FILE, False, False, True, False),
        (FileType.BLOCK_FILE, False, False, False, True),
        (FileType.CHARACTER_FILE, False, False, False, True),
        (FileType.FIFO_FILE, False, False, False, True),
        (FileType.SOCKET_FILE, False, False, False, True),
        (FileType.REPARSE_FILE, False, False, False, True),
        (FileType.TYPE_UNKNOWN, False, False, False, True),
        (FileType.FILE_NOT_FOUND, False, False, False, False),
        (FileType.STATUS_ERROR, False, False, False, False),
    ],
)
def test_type_predicates(file_type, regular, directory, symlink, other):
    s = FileStatus(file_type, Perms.OWNER_READ)
    assert s.is_regular_file() is regular
    assert s.is_directory() is directory
    assert s.is_symlink() is symlink
    assert s.is_other() is other


@pytest.mark.parametrize(
    "file_type, expected",
    [
        (FileType.STATUS_ERROR, False),
        (FileType.FILE_NOT_FOUND, False),
        (FileType.REGULAR_FILE, True),
        (FileType.DIRECTORY_FILE, True),
        (FileType.TYPE_UNKNOWN, True),
    ],
)
def test_exists(file_type, expected):
    assert FileStatus(file_type).exists() is expected


def test_status_unknown_behaves_as_status_error():
    s = FileStatus(FileType.STATUS_UNKNOWN)
    assert s == FileStatus()
    assert s.type_present() is False
    assert s.exists() is False


def test_permission_groups_combine_their_bits():
    owner = FileStatus(
        FileType.REGULAR_FILE, Perms.OWNER_READ | Perms.OWNER_WRITE | Perms.OWNER_EXE
    )
    assert owner == FileStatus(FileType.REGULAR_FILE, Perms.OWNER_ALL)
    group = FileStatus(
        FileType.REGULAR_FILE, Perms.GROUP_READ | Perms.GROUP_WRITE | Perms.GROUP_EXE
    )
    assert group == FileStatus(FileType.REGULAR_FILE, Perms.GROUP_ALL)
    others = FileStatus(
        FileType.REGULAR_FILE,
        Perms.OTHERS_READ | Perms.OTHERS_WRITE | Perms.OTHERS_EXE,
    )
    assert others == FileStatus(FileType.REGULAR_FILE, Perms.OTHERS_ALL)
    everyone = FileStatus(
        FileType.REGULAR_FILE, Perms.OWNER_ALL | Perms.GROUP_ALL | Perms.OTHERS_ALL
    )
    assert everyone == FileStatus(FileType.REGULAR_FILE, Perms.ALL_ALL)
    assert everyone.permissions == 0o777


def test_perms_mask_covers_special_bits():
    s = FileStatus(
        FileType.REGULAR_FILE,
        Perms.ALL_ALL | Perms.SET_UID_ON_EXE | Perms.SET_GID_ON_EXE | Perms.STICKY_BIT,
    )
    assert s == FileStatus(FileType.REGULAR_FILE, Perms.PERMS_MASK)
    assert s.permissions == 0o7777
    assert s.status_known()


def test_permission_bits_match_octal_mode():
    # status(".").permissions() & 0400 is checked against a plain mode integer
    s = FileStatus(FileType.DIRECTORY_FILE, Perms(0o755))
    assert s.permissions & Perms.OWNER_READ == 0o400
    assert s.permissions & Perms.ALL_ALL == 0o755


@pytest.mark.parametrize(
    "option", [Perms.ADD_PERMS, Perms.REMOVE_PERMS, Perms.SYMLINK_PERMS]
)
def test_perm_options_lie_outside_mask(option):
    s = FileStatus(FileType.REGULAR_FILE, Perms.OWNER_READ | option)
    assert s.permissions & Perms.PERMS_MASK == Perms.OWNER_READ
    assert s.permissions_present()


def test_space_info_holds_counts():
    info = SpaceInfo(capacity=100, free=60, available=40)
    assert (info.capacity, info.free, info.available) == (100, 60, 40)
    assert info == SpaceInfo(100, 60, 40)