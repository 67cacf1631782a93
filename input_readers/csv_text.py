"""
CSV READER
----------
Reads comma-delimited, double-quoted text into raw dict rows with NO
transformation beyond trimming. Row 1 = headers, rows 2+ = data.

Quoted cells may contain commas and escaped quotes (""), e.g.
    a,"b,c",d              -> ["a", "b,c", "d"]
    "x""y",z               -> ['x"y', "z"]
"""

from __future__ import annotations

import re
from typing import Dict, List

from config import CSV_ENCODINGS

_LINE_BREAK = re.compile(r"\r?\n")


def tokenize_line(line: str) -> List[str]:
    """Split one CSV line into fields (unquoted/quoted state machine)."""
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    i = 0
    while i < len(line):
        char = line[i]

        if in_quotes:
            if char == '"':
                if i + 1 < len(line) and line[i + 1] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(char)
        elif char == '"':
            in_quotes = True
        elif char == ",":
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

        i += 1

    fields.append("".join(current).strip())
    return fields


def read_csv_text(text: str) -> List[Dict[str, str]]:
    """
    Parse CSV text into row dicts keyed by the header line.

    Blank lines are skipped. Rows shorter than the header get "" for the
    missing cells; extra cells beyond the header are dropped.
    """
    lines = _LINE_BREAK.split(text)
    if not lines or not lines[0].strip():
        return []

    headers = tokenize_line(lines[0])

    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        if not line.strip():
            continue
        cells = tokenize_line(line)
        row: Dict[str, str] = {}
        for index, header in enumerate(headers):
            row[header] = cells[index] if index < len(cells) else ""
        rows.append(row)

    return rows


def decode_csv_bytes(content: bytes) -> str:
    """Decode uploaded CSV bytes, trying each configured encoding in turn."""
    for encoding in CSV_ENCODINGS:
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    # latin-1 maps every byte, so this is only reached with a custom encoding list
    return content.decode("utf-8", errors="replace")
