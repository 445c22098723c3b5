"""Raw profile sources that read previously exported scraper output."""

import asyncio
import json
from pathlib import Path

from profilecheck.exceptions import ParseError


class JsonFileSource:
    """
    Serves raw payloads from `<directory>/<username>.json` snapshots.

    Lookup is case-insensitive on the username. A missing file yields None,
    the same as an empty dataset from a live scraper.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, username: str) -> Path:
        return self.directory / f"{username.lower()}.json"

    async def __call__(self, username: str) -> dict | list[dict] | None:
        path = self.path_for(username)
        if not path.exists():
            return None
        text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON snapshot {path.name}: {e}") from e
