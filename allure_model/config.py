"""Environment keys, defaults and small helpers shared by the report model."""

import time
import uuid

DEFAULT_VERSION = "allure-model@v0.6.0"

# Path to the folder that holds the results folder.
RESULTS_PATH_ENV_KEY = "ALLURE_OUTPUT_PATH"
# Name of the results folder.
OUTPUT_FOLDER_ENV_KEY = "ALLURE_OUTPUT_FOLDER"
# URL patterns for links; each must contain exactly one "%s".
ISSUE_PATTERN_ENV_KEY = "ALLURE_ISSUE_PATTERN"
TEST_CASE_PATTERN_ENV_KEY = "ALLURE_TESTCASE_PATTERN"
TMS_LINK_PATTERN_ENV_KEY = "ALLURE_LINK_TMS_PATTERN"
# Comma separated tags that mark every test of a launch.
DEFAULT_TAGS_ENV_KEY = "ALLURE_LAUNCH_TAGS"

DEFAULT_OUTPUT_FOLDER = "allure-results"
FILE_PERMISSION = 0o644


def get_now() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def new_uuid() -> uuid.UUID:
    """Return a new time-based unique identifier."""
    return uuid.uuid1()