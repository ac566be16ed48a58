# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations


class LexicalDistance:
    """Computes the lexical distance between strings A and B.

    The "distance" between two strings is given by counting the minimum number of edits
    needed to transform string A into string B. An edit can be an insertion, deletion,
    or substitution of a single character, or a swap of two adjacent characters.

    Includes a custom alteration from Damerau-Levenshtein to treat case changes as a
    single edit, which helps identify mis-cased values with an edit distance of 1.

    The instance is bound to one input and keeps three scratch rows that are reused by
    every call to `measure`, so it must not be shared between concurrent callers.
    """

    _input: str
    _input_lower_case: str
    _rows: list[list[int]]

    def __init__(self, input_: str) -> None:
        self._input = input_
        self._input_lower_case = input_.lower()
        # lower() may change the length, e.g. "İ" -> "i̇"
        row_length = len(self._input_lower_case) + 1
        self._rows = [[0] * row_length for _ in range(3)]

    def measure(self, option: str) -> int:
        if self._input == option:
            return 0

        option_lower_case = option.lower()

        # Any case change counts as a single edit
        if self._input_lower_case == option_lower_case:
            return 1

        a, b = option_lower_case, self._input_lower_case
        a_len, b_len = len(a), len(b)

        rows = self._rows
        for j in range(b_len + 1):
            rows[0][j] = j

        for i in range(1, a_len + 1):
            up_row = rows[(i - 1) % 3]
            current_row = rows[i % 3]

            current_row[0] = i
            for j in range(1, b_len + 1):
                cost = 0 if a[i - 1] == b[j - 1] else 1

                current_cell = min(
                    up_row[j] + 1,  # delete
                    current_row[j - 1] + 1,  # insert
                    up_row[j - 1] + cost,  # substitute
                )

                if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                    # transposition
                    double_diagonal_cell = rows[(i - 2) % 3][j - 2]
                    current_cell = min(current_cell, double_diagonal_cell + 1)

                current_row[j] = current_cell

        return rows[a_len % 3][b_len]
