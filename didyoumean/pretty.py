# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print lists of suggestions and lists of dicts as tables"""
from __future__ import annotations

from typing import Any, cast, Collection, Iterator, Mapping, TextIO

import json
import sys

ResultType = Collection[Mapping[str, Any]]


def format_item(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(format_item(entry) for entry in value)
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    if isinstance(value, str):
        # json encode strings, but if the input string is exactly the same
        # as the output without quotes we'll go with the original
        json_v = json.dumps(value, ensure_ascii=False)
        return value if json_v == '"{}"'.format(value) else json_v
    return "{}".format(value)


def yield_table(
    result: ResultType,
    table_layout: Collection[str] | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts in a nicer table format yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Fields to be printed, e.g. ["option", "distance"].
        Defaults to all fields in sorted order.
    :param bool header: True to print the field name
    """
    # format all fields and collect their widths
    widths: dict[str, int] = {}
    formatted_values: list[dict[str, str]] = []
    for item in result:
        formatted_row: dict[str, str] = {}
        formatted_values.append(formatted_row)
        for key, value in item.items():
            if table_layout is not None and key not in table_layout:
                continue  # table_layout has been specified but this field will not be printed
            formatted_row[key] = format_item(value)
            widths[key] = max(len(key), len(formatted_row[key]), widths.get(key, 1))

    fields = list(table_layout) if table_layout is not None else sorted(widths)
    for field in fields:
        widths.setdefault(field, len(field))

    if header:
        yield "  ".join(f.upper().ljust(widths[f]) for f in fields)
        yield "  ".join("=" * widths[f] for f in fields)
    for formatted_row in formatted_values:
        yield "  ".join(formatted_row.get(f, "").ljust(widths[f]) for f in fields).strip()


def print_table(
    result: Collection[Any] | ResultType | None,
    table_layout: Collection[str] | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of plain values one per line, or a list of dicts as a table"""

    def yield_rows() -> Iterator[str]:
        if not result:
            return
        elif not isinstance(next(iter(result), None), dict):
            yield from (format_item(item) for item in result)
        else:
            table_result = cast(ResultType, result)
            yield from yield_table(table_result, table_layout=table_layout, header=header)

    for row in yield_rows():
        print(row, file=file or sys.stdout)
