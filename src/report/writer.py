"""Writes a run's scenario results to a YAML report."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Final, Iterable

from ruamel.yaml import YAML

from src.core.exceptions import ValidationError

from .models import DemoReport, ReportEntry, ScenarioResult

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}


class ReportWriter:
    """Serialize `ScenarioResult` records through a `DemoReport` envelope."""

    def __init__(self) -> None:
        self._yaml = YAML()
        self._yaml.default_flow_style = False
        self._yaml.indent(mapping=2, sequence=4, offset=2)
        self._logger = logger.getChild(self.__class__.__name__)

    def build_report(self, results: Iterable[ScenarioResult]) -> DemoReport:
        return DemoReport(entries=[ReportEntry.from_result(r) for r in results])

    def to_yaml(self, results: Iterable[ScenarioResult]) -> str:
        report = self.build_report(results)
        stream = StringIO()
        self._yaml.dump(report.model_dump(mode="json"), stream)
        return stream.getvalue()

    def write(self, results: Iterable[ScenarioResult], output_path: Path) -> Path:
        """
        Write the report to `output_path`, creating parent directories.

        Raises:
            ValidationError: If the path does not end in .yaml or .yml
        """
        if output_path.suffix.lower() not in _YAML_EXTS:
            raise ValidationError(
                f"Report file must have .yaml or .yml extension, "
                f"got: {output_path.suffix}",
                field_name="report_file",
            )

        content = self.to_yaml(results)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")

        self._logger.info(f"Report saved to: {output_path}")
        return output_path
