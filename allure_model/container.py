"""Containers that hold the set-up and tear-down steps of tests."""

import json
import uuid as uuid_module
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import get_now, new_uuid
from .file_manager import FileManager
from .step import Step, _json_default


@dataclass
class Container:
    """Before and after steps shared by the tests listed in ``children``."""

    uuid: uuid_module.UUID = field(default_factory=new_uuid)
    children: List[uuid_module.UUID] = field(default_factory=list)
    befores: List[Step] = field(default_factory=list)
    afters: List[Step] = field(default_factory=list)
    start: int = 0
    stop: int = 0

    def add_child(self, child_uuid: uuid_module.UUID) -> None:
        self.children.append(child_uuid)

    def is_empty(self) -> bool:
        """True when there are neither before nor after steps."""
        return not self.befores and not self.afters

    def print(self) -> Optional[Path]:
        """Write attachments and the container file, unless the container is empty."""
        if self.is_empty():
            return None
        self.print_attachments()
        return FileManager().create_file(f"{self.uuid}-container.json", self.to_json())

    def print_attachments(self) -> None:
        for step in self.befores:
            step.print_attachments()
        for step in self.afters:
            step.print_attachments()

    def begin(self) -> None:
        self.start = get_now()

    def finish(self) -> None:
        self.stop = get_now()

    def done(self) -> Optional[Path]:
        """Finish and print the container."""
        self.finish()
        return self.print()

    def to_dict(self) -> dict:
        data: dict = {"uuid": str(self.uuid)}
        if self.children:
            data["children"] = [str(child) for child in self.children]
        if self.befores:
            data["befores"] = [step.to_dict() for step in self.befores]
        if self.afters:
            data["afters"] = [step.to_dict() for step in self.afters]
        if self.start:
            data["start"] = self.start
        if self.stop:
            data["stop"] = self.stop
        return data

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict(), default=_json_default).encode("utf-8")

    @classmethod
    def from_dict(cls, data: dict) -> "Container":
        return cls(
            uuid=uuid_module.UUID(data["uuid"]),
            children=[uuid_module.UUID(child) for child in data.get("children", [])],
            befores=[Step.from_dict(step) for step in data.get("befores", [])],
            afters=[Step.from_dict(step) for step in data.get("afters", [])],
            start=data.get("start", 0),
            stop=data.get("stop", 0),
        )