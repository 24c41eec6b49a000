import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd
import requests
from bs4 import BeautifulSoup
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from query.records import Record, canonical_field
from sources.fallback_data import FALLBACK_RECORDS

logger = logging.getLogger("settlement_lookup.loader")

SUPPORTED_FORMATS = ("json", "csv", "html", "xlsx")

class RequestError(Exception):
    pass

class DataSourceError(Exception):
    pass

def coerce_record(raw: Mapping[str, Any]) -> Record:
    """
    Build a Record from a source row. Keys may be English field names or the
    Turkish column names (il, ilce, belediye, mahalle, durum). Missing or
    non-string values become empty strings.
    """
    values: Dict[str, str] = {}
    for key, value in raw.items():
        name = canonical_field(key)
        if name is None or name in values:
            continue
        values[name] = value if isinstance(value, str) else ""
    return Record(**values)

def coerce_records(rows: Iterable[Any]) -> List[Record]:
    out: List[Record] = []
    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            logger.warning("Skipping row %d: expected an object, got %s", i, type(row).__name__)
            continue
        out.append(coerce_record(row))
    return out

@retry(
    wait=wait_exponential(multiplier=1, min=1, max=8),
    stop=stop_after_attempt(3),
    retry=retry_if_exception_type(RequestError),
    reraise=True,
)
def _get(url: str, timeout: float, user_agent: str) -> requests.Response:
    headers = {
        "User-Agent": user_agent,
        "Accept": "application/json,text/csv,text/html;q=0.9,*/*;q=0.8",
        "Accept-Language": "tr-TR,tr;q=0.9,en;q=0.8",
    }
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        raise RequestError(str(e)) from e

    if resp.status_code >= 500:
        # transient
        raise RequestError(f"Server error {resp.status_code}")
    if resp.status_code >= 400:
        raise DataSourceError(f"HTTP {resp.status_code} for {url}")
    return resp

def _rows_from_json(text: str) -> List[Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataSourceError(f"Invalid JSON: {e}") from e
    if isinstance(data, dict):
        for key in ("records", "data"):
            if isinstance(data.get(key), list):
                return data[key]
        raise DataSourceError("JSON object has no 'records' or 'data' list")
    if not isinstance(data, list):
        raise DataSourceError("JSON root must be a list of records")
    return data

def _rows_from_csv(text: str) -> List[Dict[str, str]]:
    reader = csv.DictReader(io.StringIO(text))
    if not reader.fieldnames:
        raise DataSourceError("CSV has no header row")
    return list(reader)

def _rows_from_html(text: str) -> List[Dict[str, str]]:
    soup = BeautifulSoup(text, "lxml")
    table = soup.find("table")
    if table is None:
        raise DataSourceError("No <table> found in HTML")

    rows = table.find_all("tr")
    if not rows:
        return []
    headers = [c.get_text(separator=" ", strip=True) for c in rows[0].find_all(["th", "td"])]
    if not any(canonical_field(h) for h in headers):
        raise DataSourceError(f"Unrecognized table header: {headers}")

    out: List[Dict[str, str]] = []
    for tr in rows[1:]:
        cells = [c.get_text(separator=" ", strip=True) for c in tr.find_all(["td", "th"])]
        if not cells:
            continue
        out.append(dict(zip(headers, cells)))
    return out

def _rows_from_excel(content: bytes) -> List[Dict[str, Any]]:
    try:
        df = pd.read_excel(io.BytesIO(content), dtype=str, engine="openpyxl")
    except Exception as e:
        raise DataSourceError(f"Unreadable spreadsheet: {e}") from e
    df = df.fillna("")
    return df.to_dict(orient="records")

def _detect_format(name: str, content_type: str = "") -> str:
    ctype = content_type.lower()
    if "json" in ctype:
        return "json"
    if "csv" in ctype:
        return "csv"
    if "html" in ctype:
        return "html"
    if "spreadsheetml" in ctype:
        return "xlsx"
    ext = Path(name.split("?", 1)[0]).suffix.lower().lstrip(".")
    if ext in {"htm", "html"}:
        return "html"
    if ext in SUPPORTED_FORMATS:
        return ext
    raise DataSourceError(f"Cannot determine format of {name!r} ({content_type or 'no content type'})")

def parse_records(content: bytes, fmt: str) -> List[Record]:
    fmt = fmt.lower().strip()
    if fmt == "xlsx":
        rows = _rows_from_excel(content)
    else:
        text = content.decode("utf-8-sig")
        if fmt == "json":
            rows = _rows_from_json(text)
        elif fmt == "csv":
            rows = _rows_from_csv(text)
        elif fmt == "html":
            rows = _rows_from_html(text)
        else:
            raise DataSourceError(f"Unsupported data format: {fmt}")
    return coerce_records(rows)

def load_records(source: str, timeout: float = 15.0, user_agent: str = "Mozilla/5.0") -> List[Record]:
    """
    Load settlement records from a local path or an http(s) URL.
    """
    if not source:
        raise DataSourceError("No data source given")
    if source.startswith(("http://", "https://")):
        logger.debug("Fetching %s", source)
        resp = _get(source, timeout=timeout, user_agent=user_agent)
        fmt = _detect_format(source, resp.headers.get("Content-Type", ""))
        content = resp.content
    else:
        path = Path(source)
        fmt = _detect_format(path.name)
        content = path.read_bytes()

    records = parse_records(content, fmt)
    logger.info("Loaded %d records from %s (%s)", len(records), source, fmt)
    return records

def load_records_with_fallback(
    source: Optional[str],
    timeout: float = 15.0,
    user_agent: str = "Mozilla/5.0",
) -> Tuple[List[Record], bool]:
    """
    Load records, degrading to the built-in dataset on any failure.
    Returns (records, used_fallback).
    """
    if source:
        try:
            records = load_records(source, timeout=timeout, user_agent=user_agent)
            if records:
                return records, False
            logger.warning("Data source %s yielded no records; using fallback dataset", source)
        except (RequestError, DataSourceError, OSError, ValueError) as e:
            logger.warning("Failed to load %s: %s; using fallback dataset", source, e)
    else:
        logger.info("No data source configured; using fallback dataset")
    return list(FALLBACK_RECORDS), True
