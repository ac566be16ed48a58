# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .cli import DidYouMeanCLI
from typing import NoReturn, Sequence


def main(args: Sequence[str] | None = None) -> NoReturn:
    DidYouMeanCLI().main(args)


if __name__ == "__main__":
    main()
