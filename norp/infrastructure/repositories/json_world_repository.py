import os
import tempfile
from pathlib import Path
from typing import Dict

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from norp.application.ports.world_repository import IWorldRepository
from norp.domain.entities import Location, LocationId, WorldGraph
from norp.domain.errors import FileDeserializeError, FileReadError, FileSerializeError, FileWriteError

# {"<uuid>": {"id": "<uuid>", "name": "...", "description": "..."}, ...}
_world_adapter = TypeAdapter(Dict[LocationId, Location])
# Keys are kept as written on load so two spellings of one id can be told apart.
_raw_world_adapter = TypeAdapter(Dict[str, Location])
_id_adapter = TypeAdapter(LocationId)


class JsonWorldRepository(IWorldRepository):
    """
    Stores the world graph as one JSON object keyed by location id.

    Any UUID spelling is accepted on input; output always uses the canonical
    lowercase hyphenated form. Every save rewrites the whole file.
    """

    def __init__(self, indent: int = 4):
        self._indent = indent

    def load(self, path: Path) -> WorldGraph:
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path) from e

        try:
            entries = _raw_world_adapter.validate_json(raw)
            world = {}
            for key, location in entries.items():
                location_id = _id_adapter.validate_python(key)
                # Each entry must sit under its own id, and under only one spelling of it.
                if location_id != location.id or location_id in world:
                    raise FileDeserializeError(path)
                world[location_id] = location
        except ValidationError as e:
            raise FileDeserializeError(path) from e
        return world

    def save(self, world: WorldGraph, path: Path) -> None:
        """
        Serializes first, then writes to a temporary sibling file and swaps it
        into place, so a failure at any point leaves the previous file intact.
        """
        path = Path(path)
        try:
            payload = _world_adapter.dump_json(world, indent=self._indent)
        except (PydanticSerializationError, ValidationError) as e:
            raise FileSerializeError(path) from e

        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise FileWriteError(path) from e
