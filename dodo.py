from doit.action import CmdAction


def task_format():
    """Format code using ruff."""

    def router(help=False):
        if help:
            return """echo '
Code Formatter Help
=================

This task runs the ruff formatter to ensure consistent code style:
- Sorts imports (ruff check --select I --fix)
- Formats code (ruff format)

No options required - simply run:
  doit format
  '"""
        return "ruff check --select I --fix . && ruff format . "

    return {
        "actions": [CmdAction(router)],
        "params": [
            {
                "name": "help",
                "long": "help",
                "default": False,
                "type": bool,
            },
        ],
        "verbosity": 2,
    }


def task_test():
    """Run the test suite with pytest."""

    def router(help=False, fast=False):
        if help:
            return """echo '
Test Runner Help
================

Runs the pytest suite in tests/.

Options:
  --fast   skip the hypothesis property tests in tests/property

Examples:
  doit test
  doit test --fast
  '"""
        if fast:
            return "pytest tests --ignore=tests/property"
        return "pytest tests"

    return {
        "actions": [CmdAction(router)],
        "params": [
            {
                "name": "help",
                "long": "help",
                "default": False,
                "type": bool,
            },
            {
                "name": "fast",
                "long": "fast",
                "default": False,
                "type": bool,
            },
        ],
        "verbosity": 2,
    }
