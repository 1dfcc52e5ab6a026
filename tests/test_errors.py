import pytest

from chatexport.errors import DatabaseError, DiskError, ExportError, InvalidOptionsError


def test_invalid_options_message():
    err = InvalidOptionsError("pdf is not a valid export type!")
    assert str(err) == "Invalid options!\npdf is not a valid export type!"
    assert err.reason == "pdf is not a valid export type!"


def test_disk_error_wraps_os_error():
    cause = FileNotFoundError("missing file")
    err = DiskError(cause)
    assert str(err) == str(cause)
    assert err.cause is cause


def test_database_error_wraps_cause():
    cause = RuntimeError("table locked")
    err = DatabaseError(cause)
    assert str(err) == "table locked"
    assert err.cause is cause


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (InvalidOptionsError("x"), "Invalid options!\nx"),
        (DiskError(OSError("y")), "y"),
        (DatabaseError("z"), "z"),
    ],
)
def test_all_errors_share_base(error, message):
    with pytest.raises(ExportError) as excinfo:
        raise error
    assert excinfo.value is error
    assert str(excinfo.value) == message