"""Tests for the launcher orchestration."""

import dataclasses
import os

import pytest

from gramwallet.core.locations import with_trailing_separator
from gramwallet.core.models import BuildProfile, DistributionKind, OperatingSystemFamily, PlatformTarget
from gramwallet import launcher as launcher_module
from gramwallet.launcher import Launcher
from gramwallet.utils.config import Config

from conftest import FakePlatform, FakeSandbox

LINUX_DEBUG = PlatformTarget(OperatingSystemFamily.LINUX, DistributionKind.DIRECT, BuildProfile.DEBUG)
LINUX_RELEASE = PlatformTarget(OperatingSystemFamily.LINUX, DistributionKind.DIRECT, BuildProfile.RELEASE)


def make_launcher(argv, config, install_dir, app_data_path, target=LINUX_DEBUG, **kwargs):
    kwargs.setdefault("platform", FakePlatform())
    return Launcher(
        argv,
        config=config,
        sandbox_factory=FakeSandbox,
        target=target,
        environ={},
        executable_path=str(install_dir / "wallet"),
        app_data_path=app_data_path,
        **kwargs,
    )


def test_deep_link_launch(config, install_dir, app_data_path):
    argv = ["app", "--flag", "--", "tonwallet://pay/abc"]
    launcher = make_launcher(argv, config, install_dir, app_data_path)

    assert launcher.exec() == 0

    sandbox = FakeSandbox.instances[0]
    assert sandbox.executed
    assert list(sandbox.arguments) == ["app"]
    assert sandbox.context.opened_url == "tonwallet://pay/abc"
    assert sandbox.context.arguments == tuple(argv)
    assert sandbox.context.arguments_string == "app --flag -- tonwallet://pay/abc"


def test_context_fields(config, install_dir, app_data_path):
    context = make_launcher(["app"], config, install_dir, app_data_path).init()
    exe_path = with_trailing_separator(install_dir)

    assert context.app_name == "Gram Wallet"
    assert context.executable_path == exe_path
    assert context.executable_name == "wallet"
    assert context.app_data_path == app_data_path
    assert context.working_path == exe_path + "data/"
    assert context.target == LINUX_DEBUG
    assert context.opened_url is None


def test_release_build_uses_app_data(config, install_dir, app_data_path):
    context = make_launcher(["app"], config, install_dir, app_data_path, target=LINUX_RELEASE).init()

    assert context.working_path == app_data_path + "data/"


def test_portable_marker_from_config(tmp_path, install_dir, app_data_path):
    (install_dir / "Portable").mkdir()
    config = Config(config_file=tmp_path / "missing.json", environ={"GRAMWALLET_PORTABLE_MARKER": "Portable"})

    context = make_launcher(["app"], config, install_dir, app_data_path, target=LINUX_RELEASE).init()

    assert context.working_path == with_trailing_separator(install_dir) + "Portable/data/"


def test_zero_arguments(config, app_data_path):
    launcher = Launcher([], config=config, sandbox_factory=FakeSandbox, platform=FakePlatform(),
                        target=LINUX_DEBUG, environ={}, app_data_path=app_data_path)

    launcher.exec()

    sandbox = FakeSandbox.instances[0]
    assert sandbox.arguments.count == 0
    assert sandbox.context.opened_url is None
    assert sandbox.context.arguments == ()


def test_unresolved_executable_falls_back_to_app_data(config, tmp_path, app_data_path):
    launcher = Launcher(["app"], config=config, sandbox_factory=FakeSandbox, platform=FakePlatform(),
                        target=LINUX_DEBUG, environ={},
                        executable_path=str(tmp_path / "deleted" / "wallet"),
                        app_data_path=app_data_path)

    context = launcher.init()

    assert context.executable_path == ""
    assert context.executable_name == ""
    assert context.working_path == app_data_path + "data/"


def test_raw_bytes_are_decoded_for_parsing(config, install_dir, app_data_path):
    launcher = make_launcher([b"app", b"--", b"tonwallet://pay/\xff"], config, install_dir, app_data_path)

    launcher.exec()

    sandbox = FakeSandbox.instances[0]
    assert sandbox.context.opened_url == "tonwallet://pay/�"
    assert list(sandbox.arguments) == ["app"]


def test_init_runs_once_and_context_is_immutable(config, install_dir, app_data_path):
    launcher = make_launcher(["app"], config, install_dir, app_data_path)

    context = launcher.init()

    assert launcher.init() is context
    assert launcher.context is context
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.working_path = "/tmp/"


def test_platform_wraps_sandbox(config, install_dir, app_data_path):
    platform = FakePlatform()
    launcher = make_launcher(["app"], config, install_dir, app_data_path, platform=platform)

    launcher.exec()

    assert platform.calls == ["start", "finish"]
    assert set(platform.options) == {"custom_font_config_src", "custom_font_config_dst"}
    assert os.path.basename(platform.options["custom_font_config_dst"]) == "fc-custom-1.conf"
    assert platform.options["custom_font_config_src"].endswith("fc-custom.conf")


def test_platform_finishes_when_sandbox_fails(config, install_dir, app_data_path):
    platform = FakePlatform()

    def failing_sandbox(context, arguments):
        return FakeSandbox(context, arguments, error=RuntimeError("boom"))

    launcher = Launcher(["app"], config=config, sandbox_factory=failing_sandbox, platform=platform,
                        target=LINUX_DEBUG, environ={}, executable_path=str(install_dir / "wallet"),
                        app_data_path=app_data_path)

    with pytest.raises(RuntimeError, match="boom"):
        launcher.exec()
    assert platform.calls == ["start", "finish"]


def test_sandbox_exit_code_is_returned(config, install_dir, app_data_path):
    launcher = Launcher(["app"], config=config, platform=FakePlatform(), target=LINUX_DEBUG, environ={},
                        sandbox_factory=lambda context, arguments: FakeSandbox(context, arguments, result=3),
                        executable_path=str(install_dir / "wallet"), app_data_path=app_data_path)

    assert launcher.exec() == 3


def test_forward_argument_count_from_config(tmp_path, install_dir, app_data_path):
    config = Config(config_file=tmp_path / "missing.json", environ={"GRAMWALLET_FORWARD_ARGUMENTS": "2"})

    make_launcher(["app", "--", "x"], config, install_dir, app_data_path).exec()

    assert list(FakeSandbox.instances[0].arguments) == ["app", "--"]


def test_invalid_overrides_fall_back_to_detection(tmp_path, install_dir, app_data_path, monkeypatch):
    monkeypatch.setattr(launcher_module, "running_from_source", lambda: True)
    config = Config(config_file=tmp_path / "missing.json", environ={
        "GRAMWALLET_BUILD_PROFILE": "nightly",
        "GRAMWALLET_PROBE_MAX_ATTEMPTS": "-1",
        "GRAMWALLET_FORWARD_ARGUMENTS": "x",
    })
    launcher = Launcher(["app"], config=config, sandbox_factory=FakeSandbox, platform=FakePlatform(),
                        environ={}, executable_path=str(install_dir / "wallet"),
                        app_data_path=app_data_path)

    launcher.exec()

    context = FakeSandbox.instances[0].context
    # running from source is a debug build
    assert context.target.build_profile is BuildProfile.DEBUG
    assert list(FakeSandbox.instances[0].arguments) == ["app"]


def test_app_data_computed_from_environment(config, install_dir, tmp_path):
    launcher = Launcher(["app"], config=config, sandbox_factory=FakeSandbox, platform=FakePlatform(),
                        target=LINUX_RELEASE, environ={"XDG_DATA_HOME": str(tmp_path / "xdg")},
                        executable_path=str(install_dir / "wallet"))

    context = launcher.init()

    assert context.app_data_path == (tmp_path / "xdg" / "Gram Wallet").as_posix() + "/"
    assert context.working_path == context.app_data_path + "data/"


def test_create_keeps_raw_arguments():
    launcher = Launcher.create(["app", "--", "tonwallet://pay/abc"])

    assert launcher.argv == ["app", "--", "tonwallet://pay/abc"]
    assert launcher.context is None


def test_installed_package_is_a_release_build(tmp_path, install_dir, app_data_path, monkeypatch):
    monkeypatch.setattr(launcher_module, "running_from_source", lambda: False)
    config = Config(config_file=tmp_path / "missing.json", environ={"GRAMWALLET_OS_FAMILY": "linux"})
    launcher = Launcher(["gramwallet"], config=config, sandbox_factory=FakeSandbox, platform=FakePlatform(),
                        environ={}, executable_path=str(install_dir / "wallet"),
                        app_data_path=app_data_path)

    context = launcher.init()

    assert context.target.build_profile is BuildProfile.RELEASE
    assert context.working_path == app_data_path + "data/"
    assert not (install_dir / "data").exists()


def test_app_data_override_gets_trailing_separator(config, install_dir, tmp_path):
    launcher = Launcher(["app"], config=config, sandbox_factory=FakeSandbox, platform=FakePlatform(),
                        target=LINUX_RELEASE, environ={}, executable_path=str(install_dir / "wallet"),
                        app_data_path=str(tmp_path / "appdata"))

    context = launcher.init()

    assert context.app_data_path == (tmp_path / "appdata").as_posix() + "/"
    assert context.working_path == context.app_data_path + "data/"
