"""Step outputs for the GitHub Actions runner."""

from __future__ import annotations

import os
import uuid
from collections.abc import Mapping
from pathlib import Path

from branchreview.ui.console import Console


class OutputWriter:
    """Publishes step outputs to the ``GITHUB_OUTPUT`` file.

    Runners that predate the output file get the legacy ``set-output``
    workflow command instead.
    """

    def __init__(self, env: Mapping[str, str] | None = None, console: Console | None = None) -> None:
        self.env = os.environ if env is None else env
        self.console = console or Console()

    def set_output(self, name: str, value: str) -> None:
        output_path = self.env.get("GITHUB_OUTPUT")
        if not output_path:
            self.console.command("set-output", value, name=name)
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name:
            raise ValueError(f"Unexpected input: name should not contain the delimiter {delimiter}")
        if delimiter in value:
            raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter}")

        with Path(output_path).open("a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
