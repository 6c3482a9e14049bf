import pytest

pytest.importorskip("gi")
pytest.importorskip("dbus_fast")

from vboxsearch.main import build_provider  # noqa: E402
from vboxsearch.shared.config_handler import ConfigHandler  # noqa: E402


def write_config(tmp_path, text):
    config_file = tmp_path / "config.toml"
    config_file.write_text(text)
    return config_file


def test_build_provider_from_config(logger, tmp_path):
    config_file = write_config(
        tmp_path,
        "[search]\n"
        "max_results = 3\n"
        'term_separator = "-"\n'
        "[results]\n"
        'name_format = "VM {name}"\n'
        'description_format = "Machine {name}"\n'
        "[commands]\n"
        'list_vms = ["VBoxManage", "list", "vms"]\n',
    )
    config = ConfigHandler(logger, config_file=config_file)
    provider = build_provider(config, logger, None)
    assert provider.max_results == 3
    assert provider.term_separator == "-"
    assert provider.resolver.name_format == "VM {name}"
    assert provider.resolver.description_format == "Machine {name}"
    assert provider.resolver.icon_names == ("virtualbox", "computer")
    assert provider.fetcher.command == ["VBoxManage", "list", "vms"]
    assert provider.start_command == ["vboxmanage", "startvm", "{id}"]
    assert provider.notifier is None


@pytest.mark.parametrize("value", ['"ten"', "-4"])
def test_invalid_max_results_shows_everything(logger, tmp_path, value):
    config_file = write_config(tmp_path, f"[search]\nmax_results = {value}\n")
    config = ConfigHandler(logger, config_file=config_file)
    provider = build_provider(config, logger, None)
    assert provider.max_results == 0
