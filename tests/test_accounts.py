import pytest

from daytrack.accounts import (
    LoginFileError,
    StartWindow,
    account_state,
    choose_start_window,
    read_remember,
    read_username,
    reset_remember,
    welcome_text,
)


@pytest.fixture
def login_file(tmp_path):
    def write(content):
        path = tmp_path / "login_data.txt"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return write


def test_read_remember_finds_value(login_file):
    path = login_file("Username: bob\nRemember: 2\n")
    assert read_remember(path) == 2


def test_read_remember_defaults_to_zero(login_file):
    path = login_file("Username: bob\n")
    assert read_remember(path) == 0


def test_read_remember_non_number_is_zero(login_file):
    path = login_file("Remember: abc\n")
    assert read_remember(path) == 0


def test_read_remember_missing_file(tmp_path):
    with pytest.raises(LoginFileError):
        read_remember(str(tmp_path / "absent.txt"))


def test_account_state_remember_first(login_file):
    assert account_state(login_file("Remember: 2\n")) == 2


def test_account_state_stops_at_other_line(login_file):
    assert account_state(login_file("Username: bob\nRemember: 2\n")) == 0


def test_account_state_not_kept(login_file):
    assert account_state(login_file("Remember: 0\n")) == 0


def test_account_state_missing_file(tmp_path):
    with pytest.raises(LoginFileError):
        account_state(str(tmp_path / "absent.txt"))


def test_read_username(login_file):
    path = login_file("Username: bob\nRemember: 2\n")
    assert read_username(path) == "bob"


def test_read_username_absent(login_file):
    assert read_username(login_file("Remember: 2\n")) == ""


def test_read_username_missing_file(tmp_path):
    with pytest.raises(LoginFileError):
        read_username(str(tmp_path / "absent.txt"))


def test_reset_remember_replaces_flag(login_file):
    path = login_file("Username: bob\nRemember: 2\n")
    reset_remember(path)
    assert read_remember(path) == 0
    assert read_username(path) == "bob"


def test_reset_remember_appends_when_absent(login_file, tmp_path):
    path = login_file("Username: bob")
    reset_remember(path)
    content = (tmp_path / "login_data.txt").read_text(encoding="utf-8")
    assert content.endswith("Remember: 0")
    assert read_username(path) == "bob"


def test_reset_remember_creates_file(tmp_path):
    path = tmp_path / "new.txt"
    reset_remember(str(path))
    assert path.exists()
    assert read_remember(str(path)) == 0


def test_choose_missing_file_is_login(tmp_path):
    assert choose_start_window(str(tmp_path / "absent.txt")) is StartWindow.LOGIN


def test_choose_not_remembered_is_login(login_file):
    assert choose_start_window(login_file("Username: bob\nRemember: 0\n")) is StartWindow.LOGIN


def test_choose_remembered_is_welcome(login_file):
    assert choose_start_window(login_file("Username: bob\nRemember: 2\n")) is StartWindow.WELCOME


def test_choose_other_value_opens_nothing(login_file):
    assert choose_start_window(login_file("Username: bob\nRemember: 1\n")) is StartWindow.NONE


def test_choose_after_reset_is_login(login_file):
    path = login_file("Username: bob\nRemember: 2\n")
    reset_remember(path)
    assert choose_start_window(path) is StartWindow.LOGIN


def test_welcome_text(login_file):
    assert welcome_text(login_file("Username: bob\n")) == "Welcome bob!"


def test_welcome_text_missing_file(tmp_path):
    assert welcome_text(str(tmp_path / "absent.txt")) == "Welcome !"