import errno
import pathlib
from unittest import mock

import pytest

from filesys.errors import FilesystemError
from filesys.unique import unique_path

HEX = set("0123456789abcdef")


def _check_shape(model, result):
    assert len(result) == len(model)
    for m, r in zip(model, result):
        if m == "%":
            assert r in HEX
        else:
            assert r == m


def test_default_model_shape():
    result = unique_path()
    assert len(result) == 19
    assert [i for i, c in enumerate(result) if c == "-"] == [4, 9, 14]
    assert set(result.replace("-", "")) <= HEX


@pytest.mark.parametrize(
    "model",
    [
        "op-unit_test-%%%%-%%%%-%%%%",
        "foo-%%%%%-%%%%%-bar",
        "foo-%%%%%-%%%%%-%%%%%-%%%%%-%%%%%-%%%%%-%%%%%-%%%%-bar",
        "foo-%%%%%-%%%%%-%%%%%-%%%%%-%%%%%-%%%%%-%%%%%-%%%%%-bar",
    ],
)
def test_models_from_source(model):
    result = unique_path(model)
    _check_shape(model, result)
    assert "%" not in result


def test_successive_results_differ():
    first = unique_path("%" * 32)
    second = unique_path("%" * 32)
    assert len(first) == 32
    assert len(second) == 32
    assert set(first) <= HEX
    assert set(second) <= HEX
    assert first != second


def test_low_nibble_used_first():
    data = bytes([0x12, 0x34]) + bytes(14)
    with mock.patch("filesys.unique.os.urandom", return_value=data):
        assert unique_path("%%%%") == "2143"


def test_new_batch_after_sixteen_bytes():
    batches = iter([bytes([0xAB]) * 16, bytes([0xCD]) * 16])
    with mock.patch("filesys.unique.os.urandom", side_effect=lambda n: next(batches)):
        result = unique_path("%" * 34)
    assert result == "ba" * 16 + "dc"


def test_model_without_percent_needs_no_randomness():
    with mock.patch("filesys.unique.os.urandom", side_effect=OSError(errno.EIO, "io")):
        assert unique_path("plain-name.txt") == "plain-name.txt"


def test_random_source_failure_raises():
    with mock.patch("filesys.unique.os.urandom", side_effect=OSError(errno.EIO, "io")):
        with pytest.raises(FilesystemError) as info:
            unique_path("%%")
    assert info.value.code == errno.EIO


def test_path_like_model():
    model = pathlib.PurePosixPath("dir/file-%%%%.tmp")
    result = unique_path(model)
    _check_shape(str(model), result)
    assert result.startswith("dir/file-")
    assert result.endswith(".tmp")


def test_empty_model():
    assert unique_path("") == ""