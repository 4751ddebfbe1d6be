"""Labels used to group tests and build metrics."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class LabelType(str, Enum):
    """Kind of a label."""

    EPIC = "epic"
    LAYER = "layer"
    FEATURE = "feature"
    STORY = "story"
    ID = "as_id"
    SEVERITY = "severity"
    PARENT_SUITE = "parentSuite"
    SUITE = "suite"
    SUB_SUITE = "subSuite"
    PACKAGE = "package"
    THREAD = "thread"
    HOST = "host"
    TAG = "tag"
    FRAMEWORK = "framework"
    LANGUAGE = "language"
    OWNER = "owner"
    LEAD = "lead"
    ALLURE_ID = "ALLURE_ID"

    def __str__(self) -> str:
        return self.value


class SeverityType(str, Enum):
    """Severity of a test."""

    BLOCKER = "blocker"
    CRITICAL = "critical"
    NORMAL = "normal"
    MINOR = "minor"
    TRIVIAL = "trivial"

    def __str__(self) -> str:
        return self.value


@dataclass
class Label:
    """A name and value pair attached to a test."""

    name: str
    value: str

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}


def _text(value: Union[Enum, str]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def new_label(label_type: Union[LabelType, str], value: str) -> Label:
    """Build a label whose name is the given label type."""
    return Label(name=_text(label_type), value=value)


def language_label(language: str) -> Label:
    return new_label(LabelType.LANGUAGE, language)


def framework_label(framework: str) -> Label:
    return new_label(LabelType.FRAMEWORK, framework)


def id_label(test_id: str) -> Label:
    return new_label(LabelType.ID, test_id)


def tag_label(tag: str) -> Label:
    return new_label(LabelType.TAG, tag)


def tag_labels(*tags: str) -> List[Label]:
    return [tag_label(tag) for tag in tags]


def host_label(host: str) -> Label:
    return new_label(LabelType.HOST, host)


def thread_label(thread: str) -> Label:
    return new_label(LabelType.THREAD, thread)


def severity_label(severity: Union[SeverityType, str]) -> Label:
    return new_label(LabelType.SEVERITY, SeverityType(severity).value)


def sub_suite_label(sub_suite: str) -> Label:
    return new_label(LabelType.SUB_SUITE, sub_suite)


def epic_label(epic: str) -> Label:
    return new_label(LabelType.EPIC, epic)


def layer_label(layer: str) -> Label:
    return new_label(LabelType.LAYER, layer)


def story_label(story: str) -> Label:
    return new_label(LabelType.STORY, story)


def feature_label(feature: str) -> Label:
    return new_label(LabelType.FEATURE, feature)


def parent_suite_label(parent: str) -> Label:
    return new_label(LabelType.PARENT_SUITE, parent)


def suite_label(suite: str) -> Label:
    return new_label(LabelType.SUITE, suite)


def package_label(package_name: str) -> Label:
    return new_label(LabelType.PACKAGE, package_name)


def owner_label(owner_name: str) -> Label:
    return new_label(LabelType.OWNER, owner_name)


def lead_label(lead_name: str) -> Label:
    return new_label(LabelType.LEAD, lead_name)


def allure_id_label(allure_id: str) -> Label:
    return new_label(LabelType.ALLURE_ID, allure_id)