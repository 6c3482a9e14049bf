#!/usr/bin/env python3
import asyncio
import sys
from typing import Optional

from vboxsearch.core.inventory import InventoryFetcher
from vboxsearch.core.log_setup import parse_level, setup_logging
from vboxsearch.core.provider import VBoxSearchProvider
from vboxsearch.core.results import MetadataResolver
from vboxsearch.dbus.search_provider import SearchProviderService
from vboxsearch.shared.command_runner import CommandRunner
from vboxsearch.shared.config_handler import ConfigHandler
from vboxsearch.shared.notify_send import Notifier


def read_max_results(config: ConfigHandler, logger) -> int:
    value = config.get_root_setting(["search", "max_results"], 0)
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        logger.warning(f"Invalid search.max_results {value!r}, showing all results.")
        return 0


def build_provider(config: ConfigHandler, logger, notifier: Optional[Notifier]):
    get = config.get_root_setting
    runner = CommandRunner(logger)
    fetcher = InventoryFetcher(
        logger, command=get(["commands", "list_vms"]), runner=runner
    )
    resolver = MetadataResolver(
        name_format=get(["results", "name_format"]),
        description_format=get(["results", "description_format"]),
        icon_names=get(["results", "icon_names"]),
    )
    return VBoxSearchProvider(
        logger,
        fetcher,
        resolver=resolver,
        runner=runner,
        notifier=notifier,
        start_command=get(["commands", "start_vm"]),
        launch_command=get(["commands", "launch"]),
        term_separator=get(["search", "term_separator"], " "),
        max_results=read_max_results(config, logger),
        notify_app_name=get(["notifications", "app_name"]),
        notify_icon=get(["notifications", "icon"]),
    )


def main() -> int:
    logger = setup_logging()
    config = ConfigHandler(logger)
    level = parse_level(config.get_root_setting(["logging", "level"], "INFO"))
    logger = setup_logging(level=level)
    notifier = None
    if config.get_root_setting(["notifications", "enabled"], True):
        notifier = Notifier(
            logger,
            default_app_name=config.get_root_setting(["notifications", "app_name"]),
        )
    provider = build_provider(config, logger, notifier)
    service = SearchProviderService(
        provider,
        logger,
        bus_name=config.get_root_setting(["dbus", "bus_name"]),
        object_path=config.get_root_setting(["dbus", "object_path"]),
    )
    try:
        served = asyncio.run(service.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down.")
        served = True
    finally:
        if notifier is not None:
            notifier.stop()
    return 0 if served else 1


if __name__ == "__main__":
    sys.exit(main())
