"""Shared fixtures for launcher tests."""

import pytest

from gramwallet.core.locations import with_trailing_separator
from gramwallet.utils.config import Config


class FakeSandbox:
    """Records what the launcher hands over instead of starting Tk."""

    instances = []

    def __init__(self, context, arguments, result=0, error=None):
        self.context = context
        self.arguments = arguments
        self.result = result
        self.error = error
        self.executed = False
        FakeSandbox.instances.append(self)

    def exec(self):
        self.executed = True
        if self.error is not None:
            raise self.error
        return self.result


class FakePlatform:
    def __init__(self):
        self.calls = []
        self.options = None

    def start(self, options):
        self.calls.append("start")
        self.options = options

    def finish(self):
        self.calls.append("finish")


class FakeProbe:
    def __init__(self, writable):
        self.writable = writable
        self.checked = []

    def can_write_to(self, directory):
        self.checked.append(str(directory))
        return self.writable


@pytest.fixture(autouse=True)
def reset_sandboxes():
    FakeSandbox.instances = []
    yield
    FakeSandbox.instances = []


@pytest.fixture
def config(tmp_path):
    return Config(config_file=tmp_path / "missing.json", environ={})


@pytest.fixture
def install_dir(tmp_path):
    """Directory holding a fake executable named ``wallet``."""
    directory = tmp_path / "install"
    directory.mkdir()
    (directory / "wallet").write_bytes(b"")
    return directory


@pytest.fixture
def app_data_path(tmp_path):
    return with_trailing_separator(tmp_path / "appdata" / "Gram Wallet")
