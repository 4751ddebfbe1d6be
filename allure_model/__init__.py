"""Data model and JSON file writer for Allure test reports."""

__version__ = "0.6.0"

__all__ = [
    "attachment",
    "config",
    "container",
    "file_manager",
    "label",
    "link",
    "parameter",
    "result",
    "status",
    "step",
]