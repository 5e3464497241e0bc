"""
Main entry point for the DWML extractor.

Reads a DWML forecast, logs a summary of each parameter and optionally
writes the extracted forecast as JSON.
"""

import sys
from pathlib import Path
from typing import Optional

from .core import Config, setup_logger, LoggerContext
from .dwml import DWMLDocument, build_element_map
from .reader import read_xml
from .writer import SummaryWriter


class DWMLExtractApp:
    """Command-line application for DWML extraction."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.info(f"Configuration: {self.config}")

        self.writer = SummaryWriter(indent=self.config.json_indent, logger=self.logger)

    def load(self, input_file: str) -> DWMLDocument:
        """
        Parse a DWML file.

        Args:
            input_file: Path to the DWML XML file

        Returns:
            DWML document
        """
        with LoggerContext(self.logger, f"parsing {input_file}"):
            tree = read_xml(input_file)
            document = DWMLDocument(
                tree,
                element_map=build_element_map(self.config.element_map),
                logger=self.logger
            )
            self.logger.info(
                f"Found {len(document.locations)} locations, "
                f"{len(document.time_layouts)} time layouts, "
                f"{len(document.parameters)} parameters"
            )
        return document

    def run(self, input_file: Optional[str] = None, output_file: Optional[str] = None) -> DWMLDocument:
        """
        Extract a forecast.

        Args:
            input_file: DWML file; defaults to the configured input
            output_file: JSON file; defaults to the configured output (none: no export)

        Returns:
            The parsed document

        Raises:
            ValueError: If no input file is given or configured
        """
        input_file = input_file or self.config.input_file
        output_file = output_file or self.config.output_file
        if not input_file:
            raise ValueError("No input file given (use --input or input.file)")

        document = self.load(input_file)
        self.writer.log_document(document)

        if output_file:
            with LoggerContext(self.logger, "JSON export"):
                self.writer.write_json(document, Path(output_file))

        return document


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Extract forecast series from DWML documents"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="DWML XML file to read"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="JSON file to write (optional)"
    )

    args = parser.parse_args()

    try:
        app = DWMLExtractApp(config_file=args.config)
        app.run(input_file=args.input, output_file=args.output)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
