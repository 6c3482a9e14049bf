import subprocess

import pytest
import structlog


class FakeRunner:
    """Stands in for CommandRunner; returns canned output or raises."""

    def __init__(self, output=b"", error=None):
        self.output = output
        self.error = error
        self.calls = []
        self.spawned = []

    def run_sync(self, argv):
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return self.output

    def spawn(self, argv):
        self.spawned.append(list(argv))
        return True


class FakeNotifier:
    def __init__(self):
        self.sent = []

    def notify_send(self, **kwargs):
        self.sent.append(kwargs)


VBOXMANAGE_OUTPUT = (
    b'"Win10" {6a1f5b9e-0c55-4c1e-8f43-1d2b0a7e5c11}\n'
    b'"Ubuntu-Dev" {0d9c2f44-7b31-4a66-9e0e-3c8a5d9b2f70}\n'
    b'"ubuntu server 22.04" {c3e8a1d2-5f47-4b9a-8c6d-2e1f0a9b7d35}\n'
    b'"Fedora Workstation" {9b7d3c21-8e4f-4a5b-b6c7-1d2e3f4a5b6c}\n'
)


@pytest.fixture
def logger():
    return structlog.get_logger("tests")


@pytest.fixture
def runner():
    return FakeRunner(output=VBOXMANAGE_OUTPUT)


@pytest.fixture
def failing_runner():
    return FakeRunner(
        error=subprocess.CalledProcessError(1, ["vboxmanage"], stderr=b"no daemon")
    )


@pytest.fixture
def notifier():
    return FakeNotifier()
