# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print command results as tables"""
from __future__ import annotations

from typing import Any, cast, Collection, Iterator, List, Mapping, TextIO, Tuple, Union

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Collection[Union[List[str], Tuple[str], str]]


def format_item(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(format_item(entry) for entry in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    if isinstance(value, str):
        # json encode strings only when that changes more than adding quotes
        json_v = json.dumps(value, ensure_ascii=False)
        return value if json_v == '"{}"'.format(value) else json_v
    return json.dumps(value, sort_keys=True)


def flatten_list(complex_list: TableLayout | None) -> Collection[str]:
    """Flatten a multi-dimensional list to 1D list"""
    if complex_list is None:
        return []
    flattened_list: list[str] = []
    for level1 in complex_list:
        if isinstance(level1, (list, tuple)):
            flattened_list.extend(flatten_list(level1))
        else:
            flattened_list.append(level1)
    return flattened_list


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
) -> Iterator[str]:
    """
    format a list of dicts in a table yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Fields to be printed, could be 1D or 2D list. Examples:
        ["word", "correct"] or
        [["word", "misspelled"], "suggestions"]
        Fields after the first (horizontal) row are printed one per line below each entry.
    """
    widths: dict[str, int] = {}
    formatted_values: list[dict[str, str]] = []
    flattened_table_layout = flatten_list(table_layout)
    for item in result:
        formatted_row: dict[str, str] = {}
        formatted_values.append(formatted_row)
        for key, value in item.items():
            if table_layout is not None and key not in flattened_table_layout:
                continue
            formatted_row[key] = format_item(value)
            widths[key] = max(len(key), len(formatted_row[key]), widths.get(key, 1))

    # default table layout is one row per item with sorted field names
    if table_layout is None:
        table_layout = sorted(widths)
    if not isinstance(next(iter(table_layout), []), (list, tuple)):
        table_layout = [cast(List[str], table_layout)]

    horizontal_fields: Collection[str] = next(iter(table_layout), [])
    yield "  ".join(f.upper().ljust(widths.get(f, len(f))) for f in horizontal_fields).rstrip()
    yield "  ".join("=" * widths.get(f, len(f)) for f in horizontal_fields)
    for row_num, formatted_row in enumerate(formatted_values):
        if len(table_layout) > 1 and row_num > 0:
            yield ""
        yield "  ".join(formatted_row.get(f, "").ljust(widths.get(f, len(f))) for f in horizontal_fields).strip()
        vertical_fields = [cast(str, field) for field in list(table_layout)[1:]]
        fields_to_print = [(field, formatted_row[field]) for field in vertical_fields if field in formatted_row]
        if fields_to_print:
            max_key_width = max(len(key) for key, _ in fields_to_print)
            for key, value in fields_to_print:
                yield "    {:{}} = {}".format(key, max_key_width, value)


def print_table(
    result: Collection[Any] | ResultType | None,
    table_layout: TableLayout | None = None,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a table, or a list of scalars one per line"""

    def yield_rows() -> Iterator[str]:
        if not result:
            return
        elif not isinstance(next(iter(result), None), Mapping):
            yield from (format_item(item) for item in result)
        else:
            yield from yield_table(cast(ResultType, result), table_layout=table_layout)

    for row in yield_rows():
        print(row, file=file or sys.stdout)
