"""Test results: everything recorded about one test."""

import hashlib
import json
import os
import platform
import uuid as uuid_module
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from .attachment import Attachment
from .config import DEFAULT_TAGS_ENV_KEY, get_now, new_uuid
from .file_manager import FileManager
from .label import Label, LabelType, language_label, new_label, tag_label
from .link import Link
from .parameter import Parameter
from .status import Status, StatusDetail
from .step import Step, _json_default


def md5_hex(text: str) -> str:
    """Hex digest of the MD5 hash of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def _label_name(label_type: Union[LabelType, str]) -> str:
    return LabelType(label_type).value if isinstance(label_type, LabelType) else str(label_type)


@dataclass
class Result:
    """Name, status, labels, links and steps of one test."""

    name: str = ""
    full_name: str = ""
    stage: str = ""
    status: Optional[Status] = None
    status_details: StatusDetail = field(default_factory=StatusDetail)
    start: int = 0
    stop: int = 0
    uuid: uuid_module.UUID = field(default_factory=new_uuid)
    history_id: str = ""
    test_case_id: str = ""
    description: str = ""
    attachments: List[Attachment] = field(default_factory=list)
    parameters: List[Parameter] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)
    to_print: bool = True

    def add_label(self, *labels: Label) -> None:
        self.labels.extend(labels)

    def get_first_label(self, label_type: Union[LabelType, str]) -> Optional[Label]:
        """First label of the given type, or None."""
        labels = self.get_labels(label_type)
        return labels[0] if labels else None

    def get_labels(self, label_type: Union[LabelType, str]) -> List[Label]:
        name = _label_name(label_type)
        return [label for label in self.labels if label.name == name]

    def set_new_label_map(self, mapping: Dict[Union[LabelType, str], str]) -> None:
        self.add_label(*(new_label(k, v) for k, v in mapping.items()))

    def with_stage(self, stage: str) -> "Result":
        self.stage = stage
        return self

    def with_parent_suite(self, parent_name: str) -> "Result":
        if parent_name:
            self.replace_new_label(LabelType.PARENT_SUITE, parent_name)
        return self

    def with_suite(self, suite_name: str) -> "Result":
        self.replace_new_label(LabelType.SUITE, suite_name)
        return self

    def with_host(self, host_name: str) -> "Result":
        self.replace_new_label(LabelType.HOST, host_name)
        return self

    def with_sub_suites(self, *children: str) -> "Result":
        self.add_label(*(new_label(LabelType.SUB_SUITE, child) for child in children))
        return self

    def with_framework(self, framework: str) -> "Result":
        self.replace_new_label(LabelType.FRAMEWORK, framework)
        return self

    def with_language(self, language: str) -> "Result":
        self.replace_new_label(LabelType.LANGUAGE, language)
        return self

    def with_thread(self, thread: str) -> "Result":
        self.replace_new_label(LabelType.THREAD, thread)
        return self

    def with_package(self, package: str) -> "Result":
        self.replace_new_label(LabelType.PACKAGE, package)
        return self

    def with_labels(self, *labels: Label) -> "Result":
        self.add_label(*labels)
        return self

    def with_launch_tags(self) -> "Result":
        """Add a tag label for each comma separated tag in the launch tags variable."""
        tags = os.environ.get(DEFAULT_TAGS_ENV_KEY, "")
        if tags:
            self.add_label(*(tag_label(tag.strip(" ")) for tag in tags.split(",")))
        return self

    def begin(self) -> "Result":
        self.start = get_now()
        return self

    def finish(self) -> "Result":
        self.stop = get_now()
        return self

    def skip_on_print(self) -> None:
        self.to_print = False

    def print(self) -> Optional[Path]:
        """Write attachments and the result file, unless printing is switched off."""
        if not self.to_print:
            return None
        self.print_attachments()
        return FileManager().create_file(f"{self.uuid}-result.json", self.to_json())

    def print_attachments(self) -> None:
        for step in self.steps:
            step.print_attachments()
        for attachment in self.attachments:
            attachment.print()

    def done(self) -> Optional[Path]:
        """Mark as passed if no status was set, then finish and print."""
        if not self.status:
            self.status = Status.PASSED
        self.finish()
        return self.print()

    def replace_new_label(self, name: Union[LabelType, str], value: str) -> None:
        self.replace_label(new_label(name, value))

    def replace_label(self, label: Label) -> None:
        """Set the value of the first label with the same name, or add the label."""
        for existing in self.labels:
            if existing.name == label.name:
                existing.value = label.value
                return
        self.labels.append(label)

    def to_dict(self) -> dict:
        data: dict = {}
        if self.name:
            data["name"] = self.name
        if self.full_name:
            data["fullName"] = self.full_name
        if self.stage:
            data["stage"] = self.stage
        if self.status:
            data["status"] = Status(self.status).value
        data["statusDetails"] = self.status_details.to_dict()
        if self.start:
            data["start"] = self.start
        if self.stop:
            data["stop"] = self.stop
        data["uuid"] = str(self.uuid)
        if self.history_id:
            data["historyId"] = self.history_id
        if self.test_case_id:
            data["testCaseId"] = self.test_case_id
        if self.description:
            data["description"] = self.description
        if self.attachments:
            data["attachments"] = [a.to_dict() for a in self.attachments]
        if self.parameters:
            data["parameters"] = [p.to_dict() for p in self.parameters]
        if self.labels:
            data["labels"] = [label.to_dict() for label in self.labels]
        if self.links:
            data["links"] = [link.to_dict() for link in self.links]
        if self.steps:
            data["steps"] = [step.to_dict() for step in self.steps]
        return data

    def to_json(self) -> bytes:
        return json.dumps(self.to_dict(), default=_json_default).encode("utf-8")


def new_result(test_name: str, full_name: str) -> Result:
    """A started result with identifiers derived from ``full_name``."""
    test_case_id = md5_hex(full_name)
    result = Result(
        name=test_name,
        full_name=full_name,
        test_case_id=test_case_id,
        history_id=md5_hex(test_case_id),
        labels=[language_label(f"python{platform.python_version()}")],
    )
    return result.begin()