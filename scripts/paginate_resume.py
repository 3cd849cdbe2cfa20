"""
CLI Entry Point: Paginate a resume and optionally export it as PDF

Usage:
    python scripts/paginate_resume.py --sample
    python scripts/paginate_resume.py --resume resume.json --page-size Letter
    python scripts/paginate_resume.py --resume resume.json --template modern --pdf out.pdf
    python scripts/paginate_resume.py --resume resume.json --json
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.api.pdf_export import PDFExportError, ResumePDFExporter
from src.common.config import Config
from src.common.logger import setup_logging
from src.layout import InvalidFormatError, PageSize, run_layout
from src.resume.schema import ResumeSchema, default_resume
from src.resume.templates import TEMPLATE_REGISTRY


def load_resume(resume_path: str) -> ResumeSchema:
    """Load a resume document from a JSON file."""
    path = Path(resume_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {resume_path}")

    with open(path, "r") as f:
        return ResumeSchema.model_validate(json.load(f))


def print_partition(result) -> None:
    """Print a human-readable page partition."""
    layout = result.layout
    print(f"Page size: {layout.page_size.value} "
          f"({layout.page_width_pt}pt x {layout.page_height_pt}pt)")
    print(f"Content area: {layout.content_width_pt:.2f}pt x {layout.content_height_pt:.2f}pt "
          f"({layout.content_height_px:.1f}px tall)")
    print(f"Heights: {result.height_source}")
    print(f"Pages: {result.page_count} ({result.total_blocks} blocks)")
    print()

    for page in result.pages:
        print(f"Page {page.page_number}: {page.block_count} block(s), "
              f"{page.used_height_px:.0f}px used, {page.remaining_height_px:.0f}px remaining")
        for block, height in zip(page.blocks, page.heights):
            print(f"  - {block.kind:<14} {height.height_px:>7.1f}px / {height.height_pt:>6.1f}pt")


def main() -> int:
    parser = argparse.ArgumentParser(description="Paginate a resume into A4/Letter pages")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--resume", help="Path to resume JSON (ResumeSchema)")
    source.add_argument("--sample", action="store_true", help="Use the built-in sample resume")
    parser.add_argument("--page-size", choices=["A4", "Letter"], help="Override page size")
    parser.add_argument("--template", choices=sorted(TEMPLATE_REGISTRY), default=Config.DEFAULT_TEMPLATE_ID,
                        help="Template for PDF export")
    parser.add_argument("--scale-to-font", action="store_true", default=Config.SCALE_HEIGHTS_TO_FONT,
                        help="Scale heuristic heights by font size")
    parser.add_argument("--json", action="store_true", help="Print the partition as JSON")
    parser.add_argument("--pdf", help="Export PDF via pdf-service to this path")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, help="Log level")
    args = parser.parse_args()

    setup_logging(args.log_level, Config.LOG_FORMAT)

    try:
        resume = default_resume() if args.sample else load_resume(args.resume)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.page_size:
        fmt = resume.format.model_copy(update={"page_size": PageSize(args.page_size)})
        resume = resume.model_copy(update={"format": fmt})

    try:
        result = run_layout(resume.format, resume.content, scale_to_font=args.scale_to_font)
    except InvalidFormatError as e:
        print(f"Invalid format: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_partition(result)

    if args.pdf:
        exporter = ResumePDFExporter(scale_to_font=args.scale_to_font)
        try:
            pdf_bytes = exporter.export_to_pdf(resume, args.template)
        except PDFExportError as e:
            print(f"PDF export failed: {e}", file=sys.stderr)
            return 3
        Path(args.pdf).write_bytes(pdf_bytes)
        print(f"\nWrote {len(pdf_bytes)} bytes to {args.pdf}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
