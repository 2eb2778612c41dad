"""Command-line interface for analyzing a local legal document.

Runs the same OCR and generation pipeline as the HTTP API and prints or
writes the result as JSON.
"""

import argparse
import json
import mimetypes
import sys
from pathlib import Path

from src.analysis.analyzer import NoExtractableTextError, build_analyzer
from src.api.schemas import AnalysisResponse
from src.utils.config import load_config
from src.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

_DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(file_path: Path) -> str:
    """Guess a document MIME type from its file extension."""
    mime_type, _ = mimetypes.guess_type(file_path.name)
    return mime_type or _DEFAULT_MIME_TYPE


def analyze_file(
    file_path: Path,
    mime_type: str | None = None,
    config_path: Path | None = None,
) -> dict[str, str]:
    """Analyze a single document file.

    Args:
        file_path: Path to the document file.
        mime_type: MIME type override; guessed from the extension if omitted.
        config_path: Optional YAML configuration path.

    Returns:
        Dictionary with text, summary, keyTerms, and riskAssessment.
    """
    config = load_config(config_path)
    analyzer = build_analyzer(config)

    result = analyzer.analyze(
        file_path.read_bytes(), mime_type or guess_mime_type(file_path)
    )
    return AnalysisResponse(**result.to_dict()).model_dump(by_alias=True)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(
        description="Legal Document Analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a document")
    analyze_parser.add_argument("file", type=Path, help="Document file to analyze")
    analyze_parser.add_argument(
        "--mime-type", help="Document MIME type (default: guessed from extension)"
    )
    analyze_parser.add_argument(
        "-c", "--config", type=Path, help="YAML configuration file"
    )
    analyze_parser.add_argument("-o", "--output", type=Path, help="Output JSON file")

    args = parser.parse_args(argv)

    if args.command != "analyze":
        parser.print_help()
        return

    setup_logging()

    if not args.file.exists():
        print(f"Error: {args.file} does not exist", file=sys.stderr)
        sys.exit(1)

    try:
        result = analyze_file(args.file, args.mime_type, args.config)
    except NoExtractableTextError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    output = json.dumps(result, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output)
        logger.info("Result written to %s", args.output)
    else:
        print(output)


if __name__ == "__main__":
    main()
