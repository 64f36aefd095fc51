"""Reporting back to the runner through workflow commands.

Log lines, outputs and failures are written to stdout using the runner's
``::command::`` syntax. Outputs go to the ``$GITHUB_OUTPUT`` file when the
runner provides one.
"""
from __future__ import annotations

import json
import logging
import os
import sys
import uuid
from typing import Any, Mapping, Optional, TextIO


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def _to_command_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def issue_command(command: str, message: str = "", stream: Optional[TextIO] = None, **properties: str) -> None:
    stream = stream or sys.stdout
    props = ",".join(f"{key}={escape_property(str(val))}" for key, val in properties.items())
    head = f"::{command} {props}" if props else f"::{command}"
    stream.write(f"{head}::{escape_data(message)}\n")
    stream.flush()


def set_output(
    name: str,
    value: Any,
    *,
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Publish a step output. Non-string values are serialised as JSON."""
    environ = os.environ if environ is None else environ
    text = _to_command_value(value)
    output_file = environ.get("GITHUB_OUTPUT")
    if not output_file:
        issue_command("set-output", text, stream=stream, name=name)
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in text:
        raise ValueError(f"Unexpected delimiter collision while writing output {name}")
    with open(output_file, "a", encoding="utf-8") as handle:
        handle.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")


def set_failed(message: str, stream: Optional[TextIO] = None) -> None:
    issue_command("error", message, stream=stream)


class WorkflowCommandHandler(logging.Handler):
    """Render log records as runner annotations."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        stream = self.stream or sys.stdout
        try:
            message = self.format(record)
            if record.levelno >= logging.ERROR:
                issue_command("error", message, stream=stream)
            elif record.levelno >= logging.WARNING:
                issue_command("warning", message, stream=stream)
            elif record.levelno >= logging.INFO:
                stream.write(message + "\n")
                stream.flush()
            else:
                issue_command("debug", message, stream=stream)
        except Exception:
            self.handleError(record)


def configure_logging(environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach the workflow handler to the package logger."""
    environ = os.environ if environ is None else environ
    logger = logging.getLogger("artifact_cleaner")
    for handler in list(logger.handlers):
        if isinstance(handler, WorkflowCommandHandler):
            logger.removeHandler(handler)
    logger.addHandler(WorkflowCommandHandler(stream))
    logger.setLevel(logging.DEBUG if environ.get("RUNNER_DEBUG") == "1" else logging.INFO)
    return logger
