"""
Summary writer for extracted forecasts.

Renders parameter summaries for the log and writes the extracted forecast
as JSON.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from .core import constants
from .dwml import DWMLDocument, DWMLParameter


class SummaryWriter:
    """Describe and export extracted parameters."""

    def __init__(self, indent: int = constants.DEFAULT_JSON_INDENT, logger: Optional[logging.Logger] = None):
        """
        Initialize summary writer.

        Args:
            indent: JSON indentation
            logger: Logger instance
        """
        self.indent = indent
        self.logger = logger or logging.getLogger(__name__)

    def describe(self, parameter: DWMLParameter) -> List[str]:
        """
        Describe one parameter as log lines.

        Args:
            parameter: Parameter view

        Returns:
            Header line followed by layout, location and series lines
        """
        units = getattr(parameter, "units", None)
        lines = [
            f">>> {parameter.element_name} {parameter.name} {parameter.type} {units}"
        ]

        if parameter.time_layout is not None:
            lines.append(f"    time layout: {parameter.time_layout.parsed_key.to_dict()}")
        else:
            lines.append(f"    time layout: unresolved ({parameter.time_layout_key})")

        point = parameter.location.point if parameter.location is not None else None
        if point is not None:
            lines.append(f"    point: {point.to_dict()}")
        else:
            lines.append(f"    point: none ({parameter.location_key})")

        lines.append(f"    series: {len(parameter.series)} entries")
        for entry in parameter.series:
            lines.append(f"      {entry.time.start_raw}: {self._entry_value(entry)}")

        return lines

    @staticmethod
    def _entry_value(entry) -> str:
        return str(entry.value) if hasattr(entry, "value") else str(entry.url)

    def log_document(self, document: DWMLDocument) -> None:
        """Log a summary of every parameter of the document."""
        for parameter in document.parameters:
            for line in self.describe(parameter):
                self.logger.info(line)

    def write_json(self, document: DWMLDocument, path: Union[str, Path]) -> Path:
        """
        Write the extracted forecast as strict JSON.

        Unparsable numbers (NaN) are written as null.

        Args:
            document: DWML document
            path: Output file path

        Returns:
            Path written
        """
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = document.to_dict()
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=self.indent, allow_nan=False)

        self.logger.info(
            f"Wrote {len(data['parameters'])} parameters to {output_path}"
        )
        return output_path
