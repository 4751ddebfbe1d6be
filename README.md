# allure-model

A small data model for Allure test reports. It builds results, steps,
set-up/tear-down containers, labels, links, parameters and attachments, and
writes them as the JSON and attachment files that the Allure command-line
tool reads from a results folder.

## Installation

```
pip install allure-model
```

The package has no dependencies beyond the standard library.

## Quick start

```python
from allure_model.result import new_result
from allure_model.step import simple_step
from allure_model.attachment import Attachment, MimeType
from allure_model.label import epic_label, severity_label, SeverityType
from allure_model.link import issue_link
from allure_model.parameter import new_parameters

result = new_result("test_login", "tests.auth.test_login")
result.with_suite("Auth").with_labels(
    epic_label("Accounts"),
    severity_label(SeverityType.CRITICAL),
)
result.links.append(issue_link("AUTH-42"))

step = simple_step("Open login page")
step.with_new_parameters("host", "localhost", "port", 8080)
step.with_attachments(Attachment("page", MimeType.HTML, b"<html></html>"))
result.steps.append(step)

result.done()
```

`new_result()` gives the result a fresh UUID, a `testCaseId` that is the MD5
hex digest of the full name, a `historyId` that is the MD5 hex digest of that,
a `language` label such as `python3.12.1`, and sets `start` to the current
time in milliseconds.

`Result.done()` sets the status to `passed` if none was set, records `stop`,
then writes every attachment of the result and its steps, followed by
`<uuid>-result.json`. It returns the path of the result file, or `None` when
`skip_on_print()` has been called.

## Modules

- `allure_model.result` — `Result`, `new_result()`, `md5_hex()`. Labels can be
  added (`add_label`, `with_labels`, `with_sub_suites`, `set_new_label_map`),
  replaced by name (`with_suite`, `with_parent_suite`, `with_host`,
  `with_framework`, `with_language`, `with_thread`, `with_package`,
  `replace_label`, `replace_new_label`) and looked up (`get_labels`,
  `get_first_label`). `with_launch_tags()` adds one `tag` label for each
  comma separated entry in `ALLURE_LAUNCH_TAGS`.
- `allure_model.step` — `Step` and `simple_step()`. Steps nest with
  `with_child()` / `with_parent()`, take status through `passed()`,
  `failed()`, `skipped()`, `broken()`, and convert with `to_dict()` /
  `Step.from_dict()`.
- `allure_model.container` — `Container` holding `befores` and `afters` steps
  and the UUIDs of its `children`. `print()` and `done()` write
  `<uuid>-container.json` only when the container has steps.
  `Container.from_dict()` reads a container back.
- `allure_model.label` — `Label`, `LabelType`, `SeverityType`, `new_label()`
  and one helper per label type (`epic_label`, `feature_label`,
  `story_label`, `tag_label`, `tag_labels`, `owner_label`,
  `allure_id_label`, and so on).
- `allure_model.link` — `Link`, `LinkType`, `new_link()`, `named_link()`,
  `issue_link()`, `test_case_link()`, `tms_link()`, `tms_links()`.
- `allure_model.parameter` — `Parameter`, `new_parameter()`, and
  `new_parameters()`, which pairs alternating names and values and drops an
  odd last item. `str(parameter)` gives the value without surrounding quotes.
- `allure_model.attachment` — `Attachment`, `MimeType`, `extension_for()`.
  An attachment's file name is `<uuid>-attachment.<extension>`.
- `allure_model.status` — `Status` and `StatusDetail`.
- `allure_model.file_manager` — `FileManager`, `get_result_path()`,
  `get_output_folder_name()`. Files are written with mode `0644` and the
  results folder is created when missing.
- `allure_model.config` — environment variable names, `get_now()`
  (milliseconds since the epoch) and `new_uuid()`.

## Configuration

All settings come from environment variables, read when they are needed:

| Variable                  | Meaning                                                   |
|---------------------------|-----------------------------------------------------------|
| `ALLURE_OUTPUT_PATH`      | Directory that holds the results folder (default `.`)     |
| `ALLURE_OUTPUT_FOLDER`    | Name of the results folder (default `allure-results`)     |
| `ALLURE_ISSUE_PATTERN`    | URL pattern for issue links, with one `%s`                |
| `ALLURE_TESTCASE_PATTERN` | URL pattern for test-case links, with one `%s`            |
| `ALLURE_LINK_TMS_PATTERN` | URL pattern for TMS links, with one `%s`                  |
| `ALLURE_LAUNCH_TAGS`      | Comma separated tags added by `Result.with_launch_tags()` |

When a link pattern variable is unset or empty, a warning is logged and the
pattern `%s` is used, so the URL is the bare identifier. A pattern that does
not take exactly one `%s` raises `ValueError`.

## What it does not do

The package only models and writes report files. It does not hook into
pytest or any other test runner, does not run tests or record assertions, and
does not render reports; use the Allure command-line tool on the results
folder for that.

## Running the tests

```
pip install -e .[test]
pytest
```