"""Steps: the nested actions that make up a test."""

import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from .attachment import Attachment
from .config import get_now
from .parameter import Parameter, new_parameters
from .status import Status


def _json_default(value: Any) -> Any:
    """Fallback for values the json module cannot encode by itself."""
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Enum):
        return value.value
    return str(value)


def _attachment_from_dict(data: dict) -> Attachment:
    attachment = Attachment(data.get("name", ""), data.get("type", ""), b"")
    source = data.get("source", "")
    attachment.source = source
    if "-attachment." in source:
        attachment.uuid = source.split("-attachment.", 1)[0]
    return attachment


@dataclass
class Step:
    """One step of a test; steps nest inside each other."""

    name: str = ""
    status: Optional[Status] = None
    start: int = 0
    stop: int = 0
    parameters: List[Parameter] = field(default_factory=list)
    attachments: List[Attachment] = field(default_factory=list)
    steps: List["Step"] = field(default_factory=list)
    parent: Optional["Step"] = field(default=None, repr=False, compare=False)

    def with_attachments(self, *attachments: Attachment) -> "Step":
        self.attachments.extend(attachments)
        return self

    def with_parameters(self, *params: Parameter) -> "Step":
        self.parameters.extend(params)
        return self

    def with_new_parameters(self, *kv: Any) -> "Step":
        """Add parameters from alternating names and values."""
        self.parameters.extend(new_parameters(*kv))
        return self

    def passed(self) -> "Step":
        self.status = Status.PASSED
        return self

    def failed(self) -> "Step":
        self.status = Status.FAILED
        return self

    def skipped(self) -> "Step":
        self.status = Status.SKIPPED
        return self

    def broken(self) -> "Step":
        self.status = Status.BROKEN
        return self

    def begin(self) -> "Step":
        self.start = get_now()
        return self

    def finish(self) -> "Step":
        self.stop = get_now()
        return self

    def with_parent(self, parent: "Step") -> "Step":
        """Nest this step inside ``parent``."""
        parent.steps.append(self)
        self.parent = parent
        return self

    def with_child(self, child: "Step") -> "Step":
        """Nest ``child`` inside this step."""
        child.with_parent(self)
        return self

    def print_attachments(self) -> None:
        """Write the attachments of this step and all nested steps."""
        for attachment in self.attachments:
            attachment.print()
        for step in self.steps:
            step.print_attachments()

    def to_dict(self) -> dict:
        data: dict = {}
        if self.name:
            data["name"] = self.name
        if self.status:
            data["status"] = Status(self.status).value
        if self.attachments:
            data["attachments"] = [a.to_dict() for a in self.attachments]
        if self.start:
            data["start"] = self.start
        if self.stop:
            data["stop"] = self.stop
        if self.steps:
            data["steps"] = [s.to_dict() for s in self.steps]
        if self.parameters:
            data["parameters"] = [p.to_dict() for p in self.parameters]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Step":
        status = data.get("status")
        step = cls(
            name=data.get("name", ""),
            status=Status(status) if status else None,
            start=data.get("start", 0),
            stop=data.get("stop", 0),
            parameters=[Parameter(name=p["name"], value=p.get("value")) for p in data.get("parameters", [])],
            attachments=[_attachment_from_dict(a) for a in data.get("attachments", [])],
        )
        for child in data.get("steps", []):
            cls.from_dict(child).with_parent(step)
        return step


def simple_step(name: str, *parameters: Parameter) -> Step:
    """A passed step that starts and stops now."""
    return Step(name=name, status=Status.PASSED, start=get_now(), stop=get_now(), parameters=list(parameters))