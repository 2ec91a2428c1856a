"""Writes a catalogue to pretty-printed JSON files."""

import json
from datetime import date
from pathlib import Path

from rpc_catalog.catalog.aggregate import Catalogue


def format_run_date(day: date) -> str:
    """Format a run date as DD-MM-YYYY."""
    return day.strftime("%d-%m-%Y")


def output_filename(stem: str, run_date: date | None) -> str:
    if run_date is None:
        return f"{stem}.json"
    return f"{stem}-{format_run_date(run_date)}.json"


def write_catalogue(
    catalogue: Catalogue,
    output_dir: Path,
    run_date: date | None = None,
    include_names: bool = False,
) -> list[Path]:
    """Write the method list and category groupings; returns written paths."""
    documents = {
        "methods": catalogue.method_list(),
        "categories": catalogue.category_methods(),
    }
    if include_names:
        documents["category-names"] = catalogue.category_names()

    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for stem, payload in documents.items():
        path = output_dir / output_filename(stem, run_date)
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        written.append(path)
    return written
