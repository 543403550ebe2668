#!/usr/bin/env python3
"""
Proposal Extraction Service - Command Line Runner

Runs the same pipeline as POST /extract on a single document and saves the
structured result as JSON.

Usage:
    python extract_document.py <location> [options]

Examples:
    # Itemized English extraction
    python extract_document.py proposal.pdf

    # Narrative Spanish extraction of a Word document
    python extract_document.py proposal.docx --schema es

    # Document served over HTTP, saved to a specific file
    python extract_document.py https://example.com/proposal.pdf --output acme.json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from urllib.parse import urlparse

from proposal_extraction_service import (
    ExtractionError,
    ExtractionService,
    UnknownSchemaVariant,
    get_schema,
    get_settings,
    list_schemas,
)


def default_output_path(location: str, schema_name: str) -> str:
    """Build output/<document stem>_<schema>_extraction.json for a location."""
    stem = Path(urlparse(location).path or location).stem or "document"
    return f"output/{stem}_{schema_name}_extraction.json"


def save_results(result: dict, output_path: str) -> None:
    """Save extraction results to JSON file."""
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, 'w', encoding='utf-8') as f:
        json.dump(result, f, indent=2, ensure_ascii=False)


def print_schemas() -> None:
    print("Available schemas:")
    for entry in list_schemas():
        aliases = ", ".join(entry["aliases"])
        print(f"  {entry['name']} (v{entry['version']}, {entry['language']}, {entry['shape']}) - aliases: {aliases}")


def main():
    """Main entry point for the proposal extraction runner."""
    parser = argparse.ArgumentParser(
        description="Extract structured sales proposal data from a PDF or Word document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Available schemas:
  sales_proposal, default, sales, en - Itemized extraction in English
  narrative_proposal_es, narrative, es - Narrative extraction in Spanish

Examples:
  python extract_document.py proposal.pdf --schema sales
  python extract_document.py proposal.docx --schema es --output propuesta.json
        """
    )

    parser.add_argument(
        'location',
        nargs='?',
        help='URL or path of the PDF or Word document to extract'
    )

    parser.add_argument(
        '--schema', '-s',
        help='Schema variant to use (default: DEFAULT_SCHEMA_VARIANT or sales_proposal)'
    )

    parser.add_argument(
        '--output', '-o',
        help='Output file path for results (JSON format)'
    )

    parser.add_argument(
        '--model', '-m',
        help='Model to use for extraction (default: OPENAI_MODEL)'
    )

    parser.add_argument(
        '--api-key',
        help='OpenAI API key (or set OPENAI_API_KEY env var)'
    )

    parser.add_argument(
        '--list-schemas',
        action='store_true',
        help='List the registered schema variants and exit'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    args = parser.parse_args()

    if args.list_schemas:
        print_schemas()
        return

    if not args.location:
        parser.error("location is required")

    settings = get_settings()
    if args.model:
        settings = settings.model_copy(update={"openai_model": args.model})
    if args.api_key:
        settings = settings.model_copy(update={"openai_api_key": args.api_key})

    try:
        schema = get_schema(args.schema or settings.default_schema)
    except UnknownSchemaVariant as e:
        print(f"❌ Error: {e}")
        print_schemas()
        sys.exit(1)

    output_path = args.output or default_output_path(args.location, schema.name)
    output_file = Path(output_path)
    if not output_file.is_absolute() and output_file.parent.name != 'output':
        output_path = f"output/{output_path}"

    try:
        service = ExtractionService.from_settings(settings)

        if args.verbose:
            model_info = service.extractor.get_model_info()
            print(f"📡 Provider: {model_info['provider']}")
            print(f"🔗 Model: {model_info['model']}")

        print(f"🔍 Analyzing: {args.location}")
        print(f"📋 Schema: {schema.name} v{schema.version}")
        print(f"⚡ Processing...")

        result = asyncio.run(service.run(args.location, schema.name))
        save_results(result, output_path)

        print(f"✅ Extraction complete!")
        print(f"📄 Results saved to: {output_path}")

        if args.verbose:
            print(f"\n📊 Brief Summary:")
            print(f"   Customer: {result.get('customer', 'Unknown')}")
            print(f"   Industry: {result.get('industry', 'Unknown')}")
            technologies = result.get('technologies') or []
            if technologies:
                print(f"   Technologies: {', '.join(technologies[:3])}{'...' if len(technologies) > 3 else ''}")

    except KeyboardInterrupt:
        print(f"\n⏹️  Extraction interrupted by user")
        sys.exit(1)
    except ExtractionError as e:
        print(f"❌ Error: {str(e)}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
