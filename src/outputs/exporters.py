import csv
import json
from pathlib import Path
from typing import Dict, Iterable, List, Sequence
import xml.etree.ElementTree as ET

import pandas as pd

from query.records import RECORD_FIELDS, Record

def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

def _as_dicts(records: Iterable[Record]) -> List[Dict[str, str]]:
    return [r.to_dict() for r in records]

def export_json(records: Sequence[Record], path: Path) -> None:
    _ensure_parent(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(_as_dicts(records), f, ensure_ascii=False, indent=2)

def export_csv(records: Sequence[Record], path: Path) -> None:
    _ensure_parent(path)
    # utf-8-sig so spreadsheet apps pick up the Turkish letters
    with path.open("w", encoding="utf-8-sig", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(RECORD_FIELDS))
        writer.writeheader()
        for r in _as_dicts(records):
            writer.writerow(r)

def export_excel(records: Sequence[Record], path: Path) -> None:
    _ensure_parent(path)
    df = pd.DataFrame.from_records(_as_dicts(records), columns=list(RECORD_FIELDS))
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="settlements")

def export_xml(records: Iterable[Record], path: Path) -> None:
    _ensure_parent(path)
    root = ET.Element("records")
    for r in records:
        rec = ET.SubElement(root, "record")
        for k, v in r.to_dict().items():
            child = ET.SubElement(rec, k)
            child.text = v
    tree = ET.ElementTree(root)
    tree.write(path, encoding="utf-8", xml_declaration=True)

def export_records(records: Sequence[Record], path: Path, fmt: str) -> None:
    fmt = fmt.lower().strip()
    if fmt == "json":
        export_json(records, path)
    elif fmt == "csv":
        export_csv(records, path)
    elif fmt in {"excel", "xlsx"}:
        export_excel(records, path)
    elif fmt == "xml":
        export_xml(records, path)
    else:
        raise ValueError(f"Unsupported export format: {fmt}")
