import types

import pytest

pytest.importorskip("gi")

from gi.repository import Gio  # noqa: E402

from vboxsearch.shared import notify_send  # noqa: E402
from vboxsearch.shared.notify_send import NOTIFY_EXPIRE_TIMEOUT, Notifier  # noqa: E402


class FakeProxy:
    def __init__(self):
        self.calls = []

    def call(self, method_name, parameters, flags, timeout, cancellable, callback):
        self.calls.append((method_name, parameters.unpack(), flags, timeout))


class RecordingNotifier(Notifier):
    def __init__(self, logger):
        super().__init__(logger, default_app_name="VBox test")
        self.proxy = FakeProxy()

    def _make_proxy(self, result):
        return self.proxy


@pytest.fixture
def notifier(logger):
    notifier = RecordingNotifier(logger)
    yield notifier
    notifier.stop()


def test_notify_arguments(notifier):
    user_data = ("VBox test", "vboxmanage list vms: failed", "virtualbox", "VBox test")
    notifier._on_bus_acquired(None, None, user_data)
    ((method_name, parameters, flags, timeout),) = notifier.proxy.calls
    assert method_name == "Notify"
    assert parameters == (
        "VBox test",
        0,
        "virtualbox",
        "VBox test",
        "vboxmanage list vms: failed",
        [],
        {},
        NOTIFY_EXPIRE_TIMEOUT,
    )
    assert flags == Gio.DBusCallFlags.NONE
    assert timeout == -1


def test_notify_send_defaults_app_name(notifier, monkeypatch):
    requests = []

    def fake_bus_get(bus_type, cancellable, callback, user_data):
        requests.append((bus_type, user_data))
        callback(None, None, user_data)

    fake_gio = types.SimpleNamespace(
        bus_get=fake_bus_get,
        BusType=Gio.BusType,
        DBusCallFlags=Gio.DBusCallFlags,
    )
    monkeypatch.setattr(notify_send, "Gio", fake_gio)
    notifier.notify_send(title="VBox test", message="boom", icon="virtualbox")
    assert requests == [
        (Gio.BusType.SESSION, ("VBox test", "boom", "virtualbox", "VBox test"))
    ]
    assert notifier.proxy.calls[0][1][0] == "VBox test"
