import pytest

from unittest import mock

from replshell import config


@pytest.fixture(autouse=True)
def mock_appdir_directories(tmpdir):
    """Mock out the AppDir config directory so tests can't read real settings."""
    with mock.patch(
        "appdirs.user_config_dir", autospec=True, spec_set=True
    ) as user_config_dir_mock:
        user_config_dir_mock.return_value = str(tmpdir.join("user_config").mkdir())
        config.reset_settings()
        yield user_config_dir_mock
    config.reset_settings()
