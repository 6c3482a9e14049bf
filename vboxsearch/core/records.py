import re
from dataclasses import dataclass
from typing import Iterator, List, Sequence


@dataclass(frozen=True)
class VmRecord:
    """One entry of the VM inventory: a braced identifier and a display name."""

    id: str
    name: str


def build_pattern(terms: Sequence[str], separator: str = " ") -> re.Pattern:
    """
    Builds the entry pattern for `"<name>" {<id>}` lines.
    The joined terms are matched literally as a substring of the name,
    ignoring case. An empty term list matches every entry.
    """
    needle = re.escape(separator.join(terms))
    return re.compile(
        r'"(?P<name>.*' + needle + r'.*)" (?P<id>\{.*\})',
        re.IGNORECASE,
    )


def iter_records(
    text: str, terms: Sequence[str], separator: str = " "
) -> Iterator[VmRecord]:
    """
    Scans `text` from left to right, yielding a record for every entry whose
    name contains the joined terms. The cursor moves past each consumed entry,
    so an entry is never matched twice.
    """
    pattern = build_pattern(terms, separator)
    pos = 0
    while True:
        match = pattern.search(text, pos)
        if match is None:
            return
        # zero-width matches are impossible: the quotes and braces are literal
        pos = match.end()
        yield VmRecord(id=match.group("id"), name=match.group("name"))


def parse(text: str, terms: Sequence[str], separator: str = " ") -> List[VmRecord]:
    return list(iter_records(text, terms, separator))
