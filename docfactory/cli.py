#!/usr/bin/env python3
"""
CLI interface for the document factory service.
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from docfactory.application.document_app import DocumentManagementApplication
from docfactory.application.dependency_container import DependencyContainer
from docfactory.adapters.memory_output_adapter import MemoryOutputAdapter
from docfactory.domain.entities import TextFormatting


def configure_logging(level: str, verbose: bool = False) -> None:
    """Configure root logging for command line runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create Word, PDF and Excel documents through their factories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s
    %(prog)s --type word --name "Sample Report" --text "Important text" --style Bold
    %(prog)s --type pdf --name "User Manual" --password secret123
    %(prog)s --type excel --name "Financial Data" --formula "=SUM(A1:A10)" --format json
    %(prog)s --types
        """
    )

    parser.add_argument(
        "--type", "-t",
        dest="document_type",
        help="Document type to create (word, pdf, excel)"
    )

    parser.add_argument(
        "--name", "-n",
        help="Name of the document to create; without it the demo runs"
    )

    parser.add_argument("--text", help="Text to format (Word documents)")
    parser.add_argument("--style", help="Formatting style (Word documents, default: Bold)")
    parser.add_argument("--password", help="Password to protect the document with (PDF documents)")
    parser.add_argument("--formula", help="Formula to add (Excel documents)")

    parser.add_argument(
        "--types",
        action="store_true",
        help="Show available document types"
    )

    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose mode"
    )

    return parser


def _ignored_options(document_type: str, args: argparse.Namespace) -> List[str]:
    """Options given on the command line that the document type does not use."""
    document_type = document_type.strip().lower()
    given = {
        "--text": (args.text, "word"),
        "--style": (args.style, "word"),
        "--password": (args.password, "pdf"),
        "--formula": (args.formula, "excel"),
    }
    return [
        option for option, (value, used_by) in given.items()
        if value is not None and used_by != document_type
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface."""
    args = build_parser().parse_args(argv)

    container = DependencyContainer()
    config_service = container.get_configuration_service()
    configure_logging(config_service.get_log_level(), args.verbose)

    app = DocumentManagementApplication(container)

    try:
        # Command to list document types
        if args.types:
            types = [app.get_type_info(t) for t in app.get_supported_types()]
            if args.format == "json":
                print(json.dumps({"document_types": types}, indent=2))
            else:
                print("Available document types:")
                for info in types:
                    print(f"  - {info['name']} ({info['extension']}): {info['description']}")
            return 0

        # No document requested: run the demonstration
        if args.name is None and args.document_type is None:
            app.run_demo()
            return 0

        if args.name is None:
            print("Error: A document name must be specified with --name", file=sys.stderr)
            return 1

        document_type = args.document_type or config_service.get_default_document_type()
        if not config_service.validate_document_type(document_type):
            supported = ", ".join(config_service.get_supported_document_types())
            print(f"Error: Document type {document_type} not supported. Available types: {supported}",
                  file=sys.stderr)
            return 1

        for option in _ignored_options(document_type, args):
            print(f"Warning: {option} is ignored for {document_type} documents", file=sys.stderr)

        formatting = TextFormatting(text=args.text, style=args.style or "Bold") if args.text else None

        if args.verbose and args.format == "text":
            print(f"Processing {document_type} document: {args.name}")

        result = app.process_document(
            document_type=document_type,
            name=args.name,
            formatting=formatting,
            password=args.password,
            formula=args.formula,
            output=MemoryOutputAdapter() if args.format == "json" else None
        )

        # Display results
        if args.format == "json":
            info = result.document_info
            output_data = {
                "success": result.success,
                "message": result.message,
                "messages": result.messages,
                "document": {
                    "name": info.name,
                    "document_type": info.document_type.value,
                    "content": info.content,
                    "created_at": info.created_at.isoformat() if info.created_at else None,
                    "details": info.details
                } if info else None,
                "error": result.error
            }
            print(json.dumps(output_data, indent=2))
        else:
            print(f"Status: {'Success' if result.success else 'Failed'}")
            if result.message:
                print(f"Message: {result.message}")
            if result.error:
                print(f"Error: {result.error}")

        return 0 if result.success else 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
