"""Storage and output collaborators: contract stores and artifact sinks."""

import copy
import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TypeAlias

from rich.console import Console

from jurisync.utils.types import RecordBatch

FilePath: TypeAlias = str | Path

console = Console()

STORAGE_KEY = "jurisync_contracts"


class ContractStore(Protocol):
    """Key-value backing store holding plain contract records."""

    def load(self) -> RecordBatch: ...

    def save(self, records: RecordBatch) -> None: ...


class RenderSurface(Protocol):
    async def ready(self) -> None: ...

    def print(self) -> None: ...


class OutputSink(Protocol):
    """Host capability for saving artifacts and showing printable documents."""

    def write_artifact(self, content: bytes, filename: str, mime: str) -> None: ...

    async def present_document(self, html: str) -> RenderSurface: ...


@dataclass
class MemoryStore:
    records: RecordBatch = field(default_factory=list)

    def load(self) -> RecordBatch:
        return copy.deepcopy(self.records)

    def save(self, records: RecordBatch) -> None:
        self.records = copy.deepcopy(records)


class JsonFileStore:
    """Records kept as a JSON document under a single storage key."""

    def __init__(self, path: FilePath, key: str = STORAGE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def load(self) -> RecordBatch:
        if not self.path.exists():
            return []
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)

        match data:
            case {**entries} if self.key in entries:
                records = entries[self.key]
            case {}:
                return []
            case list(records):
                pass
            case other:
                raise ValueError(f"Unexpected store layout in {self.path}: {type(other).__name__}")

        if not isinstance(records, list):
            raise ValueError(f"Store key '{self.key}' does not hold a list of records")
        return records

    def save(self, records: RecordBatch) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {self.key: records}
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        console.print(f"  Saved {len(records)} contracts to {self.path}")


@dataclass
class Artifact:
    content: bytes
    filename: str
    mime: str


class CapturedSurface:
    """Rendering surface that is ready as soon as it holds the document."""

    def __init__(self, html: str, path: Path | None = None) -> None:
        self.html = html
        self.path = path
        self.printed = 0

    async def ready(self) -> None:
        return None

    def print(self) -> None:
        self.printed += 1
        target = self.path or "in-memory document"
        console.print(f"  Sent {target} to print")


@dataclass
class MemorySink:
    artifacts: list[Artifact] = field(default_factory=list)
    surfaces: list[CapturedSurface] = field(default_factory=list)

    def write_artifact(self, content: bytes, filename: str, mime: str) -> None:
        self.artifacts.append(Artifact(content, filename, mime))

    async def present_document(self, html: str) -> CapturedSurface:
        surface = CapturedSurface(html)
        self.surfaces.append(surface)
        return surface


class DirectorySink:
    """Writes artifacts and reports into an output directory."""

    def __init__(self, directory: FilePath, report_name: str = "relatorio-jurisync.html") -> None:
        self.directory = Path(directory)
        self.report_name = report_name

    def write_artifact(self, content: bytes, filename: str, mime: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / filename
        path.write_bytes(content)
        console.print(f"  Wrote {filename} ({mime}, {len(content):,} bytes) to {self.directory}")

    async def present_document(self, html: str) -> CapturedSurface:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / self.report_name
        path.write_text(html, encoding="utf-8")
        return CapturedSurface(html, path)


def load_toml_config(path: FilePath) -> dict:
    """Parse a TOML file into a plain dict."""
    with open(path, "rb") as f:
        return tomllib.load(f)
