from dataclasses import dataclass
from typing import Sequence, Tuple

from vboxsearch.core.records import VmRecord

DEFAULT_ICON_NAMES = ("virtualbox", "computer")


@dataclass(frozen=True)
class ResultMeta:
    id: str
    name: str
    description: str
    icon_names: Tuple[str, ...]


class MetadataResolver:
    """Turns VM records into the metadata shown by the search UI."""

    def __init__(
        self,
        name_format: str = "{name} VM",
        description_format: str = "{name} VirtualBox VM",
        icon_names: Sequence[str] = DEFAULT_ICON_NAMES,
    ):
        self.name_format = name_format
        self.description_format = description_format
        self.icon_names = tuple(icon_names)

    def resolve(self, record: VmRecord) -> ResultMeta:
        return ResultMeta(
            id=record.id,
            name=self.name_format.format(name=record.name),
            description=self.description_format.format(name=record.name),
            icon_names=self.icon_names,
        )
