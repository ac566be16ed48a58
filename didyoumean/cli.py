# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault
from .argx import arg
from .lexical_distance import LexicalDistance
from .speller import did_you_mean
from .suggestion_list import suggestion_list
from .vocabulary import load_vocabulary
from argparse import ArgumentParser
from typing import Any

arg.input = arg("input", help="The mistyped or unknown value")
arg.options = arg("option", nargs="*", help="Valid option to compare against")
arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.verbose = arg("-v", "--verbose", help="Show the distance of every suggestion", action="store_true", default=False)
arg.vocabulary = arg(
    "--vocabulary",
    metavar="SOURCE",
    help="Read valid options from a file, '-' for stdin, or an http(s) URL. "
    "The content is a JSON list, a JSON object whose keys are used, or one option per line. "
    "Content that does not parse as JSON is read one option per line",
)


def _to_number(name: str, value: Any, convert: type) -> Any:
    if value is None or value == "":
        return None
    try:
        return convert(value)
    except (TypeError, ValueError) as ex:
        raise argx.UserError("Invalid {} value {!r}".format(name, value)) from ex


class DidYouMeanCLI(argx.CommandLineTool):
    def __init__(self) -> None:
        super().__init__("didyoumean")

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--request-timeout",
            type=float,
            default=None,
            help="Wait for up to N seconds when fetching a vocabulary URL",
        )

    def _get_setting(self, name: str, default: Any = None) -> Any:
        """Command line argument, then config file, then environment default"""
        value = getattr(self.args, name, None)
        if value is None:
            value = self.config.get(name)
        if value is None:
            value = default
        return value

    def _get_request_timeout(self) -> float | None:
        return _to_number(
            "request_timeout", self._get_setting("request_timeout", envdefault.DIDYOUMEAN_REQUEST_TIMEOUT), float
        )

    def _get_limit(self) -> int | None:
        limit = _to_number("limit", self._get_setting("limit"), int)
        if limit is not None and limit < 1:
            raise argx.UserError("Invalid limit value {!r}: must be at least 1".format(limit))
        return limit

    def _get_options(self) -> list[str]:
        options = list(self.args.option)
        source = self._get_setting("vocabulary", envdefault.DIDYOUMEAN_VOCABULARY)
        if source:
            options.extend(load_vocabulary(source, timeout=self._get_request_timeout()))
        if not options:
            raise argx.UserError("No options to compare against, pass them as arguments or with --vocabulary")
        self.log.debug("Comparing %r against %d option(s)", self.args.input, len(options))
        return options

    @arg.input
    @arg.options
    @arg.vocabulary
    @arg.json
    @arg.verbose
    @arg("--limit", type=int, help="Show at most N suggestions")
    def suggest(self) -> None:
        """Suggest the valid options closest to a mistyped value"""
        options = self._get_options()
        suggestions = suggestion_list(self.args.input, options)
        limit = self._get_limit()
        if limit is not None:
            suggestions = suggestions[:limit]

        if self.args.verbose:
            lexical_distance = LexicalDistance(self.args.input)
            result = [{"option": option, "distance": lexical_distance.measure(option)} for option in suggestions]
            self.print_response(result, json=self.args.json, table_layout=["option", "distance"])
        else:
            self.print_response(suggestions, json=self.args.json)

    @arg.input
    @arg("option", nargs="+", help="Option to measure the distance to")
    @arg.json
    def distance(self) -> None:
        """Show the edit distance between a value and each option"""
        lexical_distance = LexicalDistance(self.args.input)
        result = [{"option": option, "distance": lexical_distance.measure(option)} for option in self.args.option]
        self.print_response(result, json=self.args.json, table_layout=["option", "distance"])

    @arg.input
    @arg.options
    @arg.vocabulary
    def check(self) -> None:
        """Fail with a hint unless the value is one of the valid options"""
        options = self._get_options()
        if self.args.input in options:
            return
        hint = did_you_mean(suggestion_list(self.args.input, options))
        raise argx.UserError("Unknown value {!r}.{}".format(self.args.input, hint))


if __name__ == "__main__":
    DidYouMeanCLI().main()
