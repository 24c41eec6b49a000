import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

# Make the src folder importable when running from repo root
CURRENT_DIR = Path(__file__).resolve().parent
ROOT_DIR = CURRENT_DIR.parent
if str(CURRENT_DIR) not in sys.path:
    sys.path.insert(0, str(CURRENT_DIR))

# Imports from src/*
from config_loader import load_settings
from outputs.exporters import export_records
from query.records import FACET_FIELDS, RECORD_FIELDS, Record
from query.session import QuerySession, QueryView
from sources.settlement_loader import load_records_with_fallback

logger = logging.getLogger("settlement_lookup")

COLUMN_LABELS = {
    "region": "İl",
    "subregion": "İlçe",
    "authority": "Belediye",
    "locality": "Mahalle",
    "status": "Durum",
}
EXPORT_EXTENSIONS = {"json": "json", "csv": "csv", "xlsx": "excel", "xml": "xml"}

def resolve_source(source: Optional[str]) -> Optional[str]:
    """Relative paths are tried against the working directory, then the repo root."""
    if not source or source.startswith(("http://", "https://")):
        return source
    path = Path(source)
    if not path.is_absolute() and not path.exists() and (ROOT_DIR / path).exists():
        return str(ROOT_DIR / path)
    return source

def render_table(rows: List[Record]) -> str:
    if not rows:
        return "Kriterlere uygun kayıt bulunamadı."
    df = pd.DataFrame.from_records([r.to_dict() for r in rows], columns=list(RECORD_FIELDS))
    df = df.rename(columns=COLUMN_LABELS)
    return df.to_string(index=False)

def render_page_footer(view: QueryView) -> str:
    lines = [f"Sayfa {view.current_page} / {view.total_pages}  ({view.total_count} kayıt)"]
    if view.page_window:
        lines.append(" ".join(
            f"[{p}]" if p == view.current_page else str(p) for p in view.page_window
        ))
    return "\n".join(lines)

def render_facets(facets: Dict[str, List[str]]) -> str:
    lines = []
    for name in FACET_FIELDS:
        options = facets.get(name, [])
        lines.append(f"{COLUMN_LABELS[name]} ({len(options)}): {', '.join(options)}")
    return "\n".join(lines)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Kırsal Alan Listesi – search, filter and page through settlement records"
    )
    parser.add_argument(
        "-d",
        "--data",
        default=None,
        help="Path or URL of the records (JSON, CSV, HTML table or XLSX). Overrides DATA_SOURCE.",
    )
    parser.add_argument(
        "-s",
        "--settings",
        default=str(CURRENT_DIR / "config" / "settings.example.json"),
        help="Path to settings JSON (page size, timeouts, data source).",
    )
    parser.add_argument("-q", "--search", default="", help="Free-text search over all columns.")
    for name in RECORD_FIELDS:
        hint = "substring match" if name == "locality" else "exact value"
        parser.add_argument(
            f"--{name}",
            default="",
            help=f"{COLUMN_LABELS[name]} filter ({hint}).",
        )
    parser.add_argument("-p", "--page", type=int, default=1, help="Page number to show.")
    parser.add_argument(
        "--facets",
        action="store_true",
        help="Print the available options of each dropdown column.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Export the full filtered result (format inferred from extension).",
    )
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings(Path(args.settings))
    log_level = str(settings.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    source = resolve_source(args.data or settings.get("DATA_SOURCE"))
    records, used_fallback = load_records_with_fallback(
        source,
        timeout=float(settings.get("REQUEST_TIMEOUT", 15.0)),
        user_agent=str(settings.get("USER_AGENT")),
    )
    if used_fallback:
        logger.warning("Showing the built-in fallback list (%d records)", len(records))

    session = QuerySession(records, page_size=settings["PAGE_SIZE"])
    session.set_search(args.search)
    session.set_filters({name: getattr(args, name) for name in RECORD_FIELDS})
    if args.page != 1:
        session.go_to_page(args.page)

    view = session.view()
    logger.info(
        "%d of %d records match (page %d of %d)",
        view.total_count, len(records), view.current_page, view.total_pages,
    )

    print(render_table(view.rows))
    print(render_page_footer(view))
    if args.facets:
        print(render_facets(view.facets))

    if args.output:
        out_path = Path(args.output).resolve()
        ext = out_path.suffix.lower().lstrip(".")
        fmt = EXPORT_EXTENSIONS.get(ext)
        if fmt is None:
            logger.error("Cannot infer export format from %s", out_path)
            return 2
        filtered = session.filtered()
        logger.info("Exporting %d records to %s (%s)", len(filtered), out_path, fmt)
        export_records(filtered, out_path, fmt)
    return 0

if __name__ == "__main__":
    sys.exit(main())
