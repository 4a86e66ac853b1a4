from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from load_velocity.domain.messages import RawLine
from load_velocity.ports.input_source import InputSource


@dataclass(frozen=True, slots=True)
class FileInputSource(InputSource):
    # File-based InputSource adapter; one NDJSON record per physical line.
    path: Path
    encoding: str = "utf-8"
    # Undecodable bytes become U+FFFD so the line is dropped downstream as malformed.
    errors: str = "replace"

    def read(self) -> Iterable[RawLine]:
        # Streamed line-by-line so large inputs are never loaded whole.
        with self.path.open("r", encoding=self.encoding, errors=self.errors) as handle:
            for idx, line in enumerate(handle, start=1):
                yield RawLine(line_no=idx, raw_text=line.rstrip("\n"))
