"""multidoc CLI - Command-line interface for multi-document YAML/JSON files.

This module provides the main CLI entrypoint, allowing users to inspect
how a file splits into documents and to convert it to JSON or YAML.
"""

import argparse
import json
import logging
import sys

from ruamel.yaml import YAML

from multidoc.core.assembler import assemble
from multidoc.core.config import get_config_value
from multidoc.core.decoder import is_blank
from multidoc.core.errors import MultiDocError
from multidoc.core.loader import load_multi_yaml_or_json, read_file_bytes

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


def main(argv=None):
    """Main CLI entrypoint for multidoc."""
    parser = argparse.ArgumentParser(
        prog="multidoc",
        description="multidoc - split and decode multi-document YAML/JSON files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show where documents start and how large they are
  multidoc split manifests.yaml

  # Decode every document and print a JSON array
  multidoc decode manifests.yaml

  # Re-emit the documents as a YAML stream
  multidoc decode manifests.yaml --format yaml

Note:
  Defaults can be set in config.json, e.g. {'output': {'format': 'yaml', 'indent': 4}}.
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="List the documents found in a file"
    )
    split_parser.add_argument(
        "input",
        help="Path to input file"
    )
    split_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    # Decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode every document and print the values"
    )
    decode_parser.add_argument(
        "input",
        help="Path to input file"
    )
    decode_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from config.json or json)"
    )
    decode_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (default: from config.json or 2)"
    )
    decode_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)

    # Setup logging
    if hasattr(args, 'verbose') and args.verbose:
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')

    # Handle commands
    if args.command == "split":
        return cmd_split(args)
    elif args.command == "decode":
        return cmd_decode(args)
    else:
        parser.print_help()
        return 1


def cmd_split(args):
    """Handle split command."""
    try:
        assembler = assemble(read_file_bytes(args.input))
    except MultiDocError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for index, (document, line) in enumerate(zip(assembler.documents, assembler.start_lines)):
        suffix = " (blank)" if is_blank(document) else ""
        print(f"document {index}: line {line}, {len(document)} bytes{suffix}")
    logger.info(f"{args.input}: {len(assembler.documents)} documents")
    return 0


def cmd_decode(args):
    """Handle decode command."""
    output_format = args.format
    if output_format is None:
        output_format = get_config_value(["output", "format"], default="json")
    if output_format not in OUTPUT_FORMATS:
        print(f"Error: unknown output format: {output_format}", file=sys.stderr)
        return 1

    indent = args.indent
    if indent is None:
        configured = get_config_value(["output", "indent"], default=2)
        try:
            indent = int(configured)
        except (TypeError, ValueError):
            print(f"Error: invalid indent: {configured!r}", file=sys.stderr)
            return 1

    try:
        values = load_multi_yaml_or_json(args.input)
    except MultiDocError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output_format == "yaml":
        yaml = YAML()
        yaml.default_flow_style = False
        yaml.explicit_start = True
        yaml.dump_all(values, sys.stdout)
    else:
        print(json.dumps(values, indent=indent, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
