# filesys

A small library of filesystem operations built around explicit file status
values, directory entries that cache their status, and directory iterators
(flat and recursive) with control over recursion. Paths are passed as
`str`, `bytes` or `os.PathLike` values and returned as `str`.

## Installation

```
pip install .
```

The library has no dependencies outside the standard library.

## Overview

### File status

`filesys.status` defines `FileType`, the `Perms` bit flags, `CopyOption`,
`SymlinkOption`, `SpaceInfo` and `FileStatus`. A `FileStatus` pairs a file
type with permission bits. It answers `type_present()`,
`permissions_present()`, `status_known()`, `exists()`, `is_regular_file()`,
`is_directory()`, `is_symlink()` and `is_other()`.

### Operations

`filesys.operations` provides the queries and actions:

```python
from filesys.operations import status, file_size, create_directories, remove_all
from filesys.status import FileType

st = status("setup.cfg")
if st.type is FileType.REGULAR_FILE:
    print(file_size("setup.cfg"))

create_directories("build/out/logs")
print(remove_all("build"))  # number of entries removed
```

`status` and `symlink_status` report a missing file as
`FileType.FILE_NOT_FOUND` and do not raise. Other failures raise
`filesys.errors.FilesystemError`, a subclass of `OSError`. Its message names
the operation and the paths involved. Its `code` attribute holds the
operating-system error number, and `path1` and `path2` hold the paths.

The module also has `exists`, `is_directory`, `is_regular_file`,
`is_other`, `is_symlink`, `is_empty`, `hard_link_count`, `last_write_time`,
`set_last_write_time`, `permissions`, `read_symlink`, `remove`, `rename`,
`resize_file`, `space`, `create_directory`, `create_symlink`,
`create_directory_symlink`, `create_hard_link`, `copy_file`,
`copy_symlink`, `current_path`, `set_current_path`, `initial_path`,
`equivalent`, `absolute`, `canonical`, `system_complete`,
`temp_directory_path` and `possible_large_file_size_support`.

`permissions` replaces the permission bits. With `Perms.ADD_PERMS` it adds
the given bits, and with `Perms.REMOVE_PERMS` it removes them. With
`Perms.SYMLINK_PERMS` it acts on a symlink itself. `copy_file` refuses an
existing target unless it is given `CopyOption.OVERWRITE_IF_EXISTS`.

### Unique paths

```python
from filesys.unique import unique_path

unique_path("tmp-%%%%-%%%%")  # e.g. 'tmp-3f9a-0c1e'
unique_path()                 # model '%%%%-%%%%-%%%%-%%%%'
```

Every `%` in the model is replaced by a random lowercase hexadecimal digit.
The digits come from `os.urandom`. `unique_path` only builds the name and
does not create anything on disk.

### Directory iteration

```python
from filesys.directory import DirectoryIterator, RecursiveDirectoryIterator

for entry in DirectoryIterator("."):
    print(entry.path, entry.status().type)

walker = RecursiveDirectoryIterator(".")
for entry in walker:
    if entry.path.endswith(".git"):
        walker.disable_recursion_pending()
    print("  " * walker.depth(), entry.path)
```

A `DirectoryEntry` compares and hashes by path and can be passed wherever
a path is accepted. It looks up its status and symlink status on first use
and caches them. It also has `assign` and `replace_filename`.

`RecursiveDirectoryIterator` does not follow directory symlinks unless it
is given `SymlinkOption.RECURSE`. It has `depth()`, `recursion_pending()`,
`disable_recursion_pending()`, `pop()`, `status()` and `symlink_status()`.

### Convenience helpers

`filesys.convenience` offers `extension`, `basename` and `change_extension`:

```python
from filesys.convenience import extension, basename, change_extension

extension("archive.tar.gz")            # '.gz'
basename("/a/b/report.txt")            # 'report'
change_extension("notes.md", ".html")  # 'notes.html'
```

## What it does not do

* There is no path class. Paths are plain strings, and splitting and
  joining are left to `os.path` or `pathlib`.
* There is no command-line tool.
* There is no recursive copy of directory trees. `copy_file` copies a
  single file and `copy_symlink` copies a single link.

## Running the tests

```
pip install ".[test]"
pytest
```