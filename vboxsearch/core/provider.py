from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from vboxsearch.core.inventory import InventoryFetcher, InventoryUnavailable
from vboxsearch.core.records import VmRecord, parse
from vboxsearch.core.results import MetadataResolver, ResultMeta
from vboxsearch.shared.command_runner import CommandRunner, expand_command

DEFAULT_START_COMMAND = ("vboxmanage", "startvm", "{id}")
DEFAULT_LAUNCH_COMMAND = ("virtualbox",)


class SearchProviderPort(ABC):
    """
    The operations a desktop shell calls on a search provider.
    Transport adapters (D-Bus) delegate to an implementation of this class.
    """

    @abstractmethod
    def get_initial_result_set(self, terms: Sequence[str]) -> List[str]:
        pass

    @abstractmethod
    def get_subsearch_result_set(
        self, previous_results: Sequence[str], terms: Sequence[str]
    ) -> List[str]:
        pass

    @abstractmethod
    def get_result_metas(self, identifiers: Sequence[str]) -> List[ResultMeta]:
        pass

    @abstractmethod
    def activate_result(
        self, identifier: str, terms: Sequence[str], timestamp: int
    ) -> None:
        pass

    @abstractmethod
    def launch_search(self, terms: Sequence[str], timestamp: int) -> None:
        pass

    def filter_results(self, results: Sequence[str], max_results: int) -> List[str]:
        """
        Keeps the first `max_results` identifiers, in their original order.
        A limit of zero or less keeps everything.
        """
        if max_results <= 0:
            return list(results)
        return list(results[:max_results])


class VBoxSearchProvider(SearchProviderPort):
    """
    Searches VirtualBox machines by name.
    Every query re-runs the inventory command; the records of the latest
    query are kept so their metadata can be resolved without another fetch.
    """

    def __init__(
        self,
        logger: Any,
        fetcher: InventoryFetcher,
        resolver: Optional[MetadataResolver] = None,
        runner: Optional[CommandRunner] = None,
        notifier: Any = None,
        start_command: Sequence[str] = DEFAULT_START_COMMAND,
        launch_command: Sequence[str] = DEFAULT_LAUNCH_COMMAND,
        term_separator: str = " ",
        max_results: int = 0,
        notify_app_name: str = "VirtualBox machines launcher",
        notify_icon: str = "virtualbox",
    ):
        self.logger = logger
        self.fetcher = fetcher
        self.resolver = resolver or MetadataResolver()
        self.runner = runner or CommandRunner(logger)
        self.notifier = notifier
        self.start_command = list(start_command)
        self.launch_command = list(launch_command)
        self.term_separator = term_separator
        self.max_results = max_results
        self.notify_app_name = notify_app_name
        self.notify_icon = notify_icon
        self._records: Dict[str, VmRecord] = {}

    def get_initial_result_set(self, terms: Sequence[str]) -> List[str]:
        return self._get_result_set(terms)

    def get_subsearch_result_set(
        self, previous_results: Sequence[str], terms: Sequence[str]
    ) -> List[str]:
        # previous_results is not consulted; every query re-reads the inventory
        return self._get_result_set(terms)

    def get_result_metas(self, identifiers: Sequence[str]) -> List[ResultMeta]:
        if any(identifier not in self._records for identifier in identifiers):
            self.logger.debug("Unknown result ids requested, refreshing inventory.")
            self._refresh_records()
        metas = []
        for identifier in identifiers:
            record = self._records.get(identifier)
            if record is None:
                self.logger.warning(f"Dropping stale result id {identifier}")
                continue
            metas.append(self.resolver.resolve(record))
        return metas

    def activate_result(
        self, identifier: str, terms: Sequence[str], timestamp: int
    ) -> None:
        self.logger.info(f"Starting VM {identifier}")
        self.runner.spawn(expand_command(self.start_command, id=identifier))

    def launch_search(self, terms: Sequence[str], timestamp: int) -> None:
        self.runner.spawn(self.launch_command)

    def _get_result_set(self, terms: Sequence[str]) -> List[str]:
        records = self._search(terms)
        if records is None:
            return []
        results = [record.id for record in records]
        if self.max_results > 0:
            results = self.filter_results(results, self.max_results)
        self.logger.debug(f"{len(results)} VMs match {list(terms)}")
        return results

    def _search(self, terms: Sequence[str]) -> Optional[List[VmRecord]]:
        try:
            text = self.fetcher.fetch()
        except InventoryUnavailable as e:
            self.logger.error(f"VM inventory unavailable: {e}")
            self._report_error(e)
            self._records = {}
            return None
        records = parse(text, terms, self.term_separator)
        self._records = {record.id: record for record in records}
        return records

    def _refresh_records(self) -> None:
        """Adds every VM of a fresh inventory to the known records."""
        try:
            text = self.fetcher.fetch()
        except InventoryUnavailable as e:
            self.logger.error(f"VM inventory unavailable: {e}")
            return
        for record in parse(text, [], self.term_separator):
            self._records.setdefault(record.id, record)

    def _report_error(self, error: InventoryUnavailable) -> None:
        if self.notifier is None:
            return
        self.notifier.notify_send(
            title=self.notify_app_name,
            message=str(error),
            icon=self.notify_icon,
            app_name=self.notify_app_name,
        )
