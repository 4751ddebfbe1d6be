import pytest

from allure_model.label import (
    Label,
    LabelType,
    SeverityType,
    allure_id_label,
    epic_label,
    feature_label,
    framework_label,
    host_label,
    id_label,
    language_label,
    layer_label,
    lead_label,
    new_label,
    owner_label,
    package_label,
    parent_suite_label,
    severity_label,
    story_label,
    sub_suite_label,
    suite_label,
    tag_label,
    tag_labels,
    thread_label,
)


@pytest.mark.parametrize(
    "factory, argument, name",
    [
        (epic_label, "epicTest", "epic"),
        (layer_label, "layerTest", "layer"),
        (feature_label, "featureTest", "feature"),
        (story_label, "storyTest", "story"),
        (id_label, "idTest", "as_id"),
        (parent_suite_label, "parentSuiteTest", "parentSuite"),
        (suite_label, "suiteTest", "suite"),
        (sub_suite_label, "subSuiteTest", "subSuite"),
        (package_label, "packageTest", "package"),
        (thread_label, "threadTest", "thread"),
        (host_label, "hostTest", "host"),
        (tag_label, "tagTest", "tag"),
        (framework_label, "frameWorkTest", "framework"),
        (language_label, "languageTest", "language"),
        (owner_label, "ownerTest", "owner"),
        (lead_label, "leadTest", "lead"),
        (allure_id_label, "idAllureTest", "ALLURE_ID"),
    ],
)
def test_label_creation(factory, argument, name):
    label = factory(argument)
    assert label.name == name
    assert label.value == argument


def test_label_type_text():
    assert str(LabelType.PARENT_SUITE) == "parentSuite"
    assert LabelType("as_id") is LabelType.ID


@pytest.mark.parametrize("severity", list(SeverityType))
def test_severity_label(severity):
    label = severity_label(severity)
    assert label.name == "severity"
    assert label.value == str(severity)


def test_severity_label_blocker():
    assert severity_label(SeverityType.BLOCKER).value == "blocker"


def test_severity_label_from_text():
    assert severity_label("critical") == Label("severity", "critical")


def test_severity_label_rejects_unknown():
    with pytest.raises(ValueError):
        severity_label("catastrophic")


def test_tag_labels():
    labels = tag_labels("a", "b")
    assert labels == [Label("tag", "a"), Label("tag", "b")]


def test_tag_labels_empty():
    assert tag_labels() == []


def test_new_label_with_plain_text_type():
    assert new_label("custom", "x").to_dict() == {"name": "custom", "value": "x"}


def test_label_to_dict():
    assert epic_label("E").to_dict() == {"name": "epic", "value": "E"}