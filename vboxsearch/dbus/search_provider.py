import asyncio
from typing import Any, Dict, Optional

from dbus_fast import BusType, Variant
from dbus_fast.aio import MessageBus
from dbus_fast.constants import NameFlag, RequestNameReply
from dbus_fast.service import ServiceInterface, method
from gi.repository import Gio  # pyright: ignore

from vboxsearch.core.provider import SearchProviderPort
from vboxsearch.core.results import ResultMeta

SEARCH_PROVIDER_IFACE = "org.gnome.Shell.SearchProvider2"


def serialize_meta(meta: ResultMeta) -> Dict[str, Variant]:
    """Converts a ResultMeta into the a{sv} dictionary GNOME Shell expects."""
    icon = Gio.ThemedIcon.new_from_names(list(meta.icon_names))
    return {
        "id": Variant("s", meta.id),
        "name": Variant("s", meta.name),
        "description": Variant("s", meta.description),
        "gicon": Variant("s", icon.to_string()),
    }


class SearchProvider2Interface(ServiceInterface):
    """
    org.gnome.Shell.SearchProvider2, delegating every call to a
    SearchProviderPort.
    """

    def __init__(self, provider: SearchProviderPort, logger: Any):
        super().__init__(SEARCH_PROVIDER_IFACE)
        self.provider = provider
        self.logger = logger

    @method()
    def GetInitialResultSet(self, terms: "as") -> "as":
        self.logger.debug(f"GetInitialResultSet {terms}")
        return self.provider.get_initial_result_set(terms)

    @method()
    def GetSubsearchResultSet(self, previous_results: "as", terms: "as") -> "as":
        self.logger.debug(f"GetSubsearchResultSet {terms}")
        return self.provider.get_subsearch_result_set(previous_results, terms)

    @method()
    def GetResultMetas(self, identifiers: "as") -> "aa{sv}":
        metas = self.provider.get_result_metas(identifiers)
        return [serialize_meta(meta) for meta in metas]

    @method()
    def ActivateResult(self, identifier: "s", terms: "as", timestamp: "u"):
        self.provider.activate_result(identifier, terms, timestamp)

    @method()
    def LaunchSearch(self, terms: "as", timestamp: "u"):
        self.provider.launch_search(terms, timestamp)


class SearchProviderService:
    """
    Owns one exported search provider on a session bus connection.
    """

    def __init__(
        self,
        provider: SearchProviderPort,
        logger: Any,
        bus_name: str,
        object_path: str,
    ):
        self.logger = logger
        self.bus_name = bus_name
        self.object_path = object_path
        self.interface = SearchProvider2Interface(provider, logger)
        self.bus: Optional[MessageBus] = None

    def export(self, bus: MessageBus) -> None:
        bus.export(self.object_path, self.interface)
        self.bus = bus

    def unexport(self, bus: MessageBus) -> None:
        bus.unexport(self.object_path, self.interface)
        if self.bus is bus:
            self.bus = None

    async def run(self) -> bool:
        """
        Connects to the session bus, exports the provider and serves
        requests until the connection drops. Returns False when the
        well-known name could not be acquired.
        """
        bus = await MessageBus(bus_type=BusType.SESSION).connect()
        self.export(bus)
        reply = await bus.request_name(self.bus_name, flags=NameFlag.DO_NOT_QUEUE)
        if reply not in (
            RequestNameReply.PRIMARY_OWNER,
            RequestNameReply.ALREADY_OWNER,
        ):
            self.logger.error(
                f"Failed to acquire {self.bus_name}. Is another provider running?"
            )
            self.unexport(bus)
            bus.disconnect()
            return False
        self.logger.info(
            f"Search provider exported as {self.bus_name} at {self.object_path}"
        )
        try:
            await bus.wait_for_disconnect()
        except asyncio.CancelledError:
            self.unexport(bus)
            bus.disconnect()
            raise
        return True
