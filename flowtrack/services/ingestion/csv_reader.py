"""Lenient CSV tokenizer for vendor wearable exports."""

import re

CsvRow = dict[str, str]

_LINE_BREAK = re.compile(r"\r?\n")


def split_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into trimmed cells.

    Commas inside double quotes do not split, and a doubled quote inside
    a quoted section is a literal quote. Unbalanced quotes are tolerated:
    the rest of the line is read as one cell.
    """
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        ch = line[i]
        if ch == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1

    cells.append("".join(current).strip())
    return cells


def parse_csv(text: str) -> list[CsvRow]:
    """
    Parse CSV text into rows keyed by lower-cased header names.

    Empty lines are dropped and the first remaining line is the header.
    Rows shorter than the header get empty strings for missing cells.

    Args:
        text: Raw CSV contents

    Returns:
        List of rows mapping header name to cell value
    """
    lines = [line for line in _LINE_BREAK.split(text) if line]
    if not lines:
        return []

    headers = [header.lower().strip() for header in split_csv_line(lines[0])]

    rows: list[CsvRow] = []
    for line in lines[1:]:
        cells = split_csv_line(line)
        rows.append(
            {
                header: (cells[index] if index < len(cells) else "").strip()
                for index, header in enumerate(headers)
            }
        )

    return rows
