# Copyright 2026, dictspell authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault, session
from .cliarg import arg
from .comparator import Collator, SENSITIVITIES
from .dictionary import DEFAULT_SEARCH_RADIUS, Dictionary
from .editdistance import distance
from .service import SpellCheckerService
from argparse import ArgumentParser
from typing import Any, Callable

import re

WORDLIST_INFO_COLUMNS = ["source", "words", "search_radius", "sensitivity"]


def no_wordlist(fun: Callable) -> Callable:
    fun.no_wordlist = True  # type: ignore
    return fun


def parse_positive_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as ex:
        raise argx.UserError("Invalid {}: {!r} is not an integer".format(name, value)) from ex
    if number < 1:
        raise argx.UserError("Invalid {}: {!r} must be positive".format(name, value))
    return number


class DictSpellCLI(argx.CommandLineTool):
    dictionary: Dictionary

    def __init__(self) -> None:
        argx.CommandLineTool.__init__(self, "dictspell")
        self.wordlist_source: str | None = None

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--wordlist",
            help="Word list file or http(s) URL, one word per line [DICTSPELL_WORDLIST]",
            default=envdefault.DICTSPELL_WORDLIST,
            metavar="PATH|URL",
        )
        parser.add_argument(
            "--pattern",
            dest="patterns",
            action="append",
            default=[],
            metavar="REGEX",
            help="Regular expression of words that are always correct, can be repeated",
        )
        parser.add_argument(
            "--search-radius",
            help="Word list positions examined around the closest match [DICTSPELL_SEARCH_RADIUS]",
            default=envdefault.DICTSPELL_SEARCH_RADIUS,
        )
        parser.add_argument(
            "--sensitivity",
            choices=SENSITIVITIES,
            default=envdefault.DICTSPELL_SENSITIVITY,
            help="Comparison sensitivity used to sort and search the word list [DICTSPELL_SENSITIVITY]",
        )
        parser.add_argument(
            "--request-timeout",
            type=int,
            default=None,
            help="Wait for up to N seconds when fetching a word list URL (default: infinite)",
        )

    def _get_setting(self, name: str, default: Any = None) -> Any:
        """Command line or environment value, then config file, then `default`"""
        value = getattr(self.args, name, None)
        if value is not None:
            return value
        return self.config.get(name, default)

    def get_search_radius(self) -> int:
        return parse_positive_int(self._get_setting("search_radius", DEFAULT_SEARCH_RADIUS), "search radius")

    def get_sensitivity(self) -> str:
        sensitivity = self._get_setting("sensitivity", "accent")
        if sensitivity not in SENSITIVITIES:
            raise argx.UserError(
                "Invalid sensitivity {!r}: expected one of {}".format(sensitivity, ", ".join(SENSITIVITIES))
            )
        return sensitivity

    def get_patterns(self) -> list[str]:
        configured = self.config.get("patterns", [])
        if not isinstance(configured, list) or not all(isinstance(pattern, str) for pattern in configured):
            raise argx.UserError(
                "Invalid patterns in config file: expected a list of strings, got {!r}".format(configured)
            )
        patterns = configured + (self.args.patterns or [])
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as ex:
                raise argx.UserError("Invalid pattern {!r}: {}".format(pattern, ex)) from ex
        return patterns

    def get_service(self) -> SpellCheckerService:
        return SpellCheckerService(compare=Collator(self.get_sensitivity()), search_radius=self.get_search_radius())

    def read_text(self, source: str) -> str:
        try:
            return session.read_text(source, timeout=self.args.request_timeout)
        except OSError as ex:
            raise argx.UserError("Failed to read {!r}: {}: {}".format(source, ex.__class__.__name__, ex)) from ex
        except UnicodeDecodeError as ex:
            raise argx.UserError("{!r} is not valid UTF-8 text".format(source)) from ex

    def load_dictionary(self) -> Dictionary:
        source = self._get_setting("wordlist")
        if not source:
            raise argx.UserError(
                "Specify a word list: use --wordlist, DICTSPELL_WORDLIST or the wordlist item in the config file."
            )
        dictionary = self.get_service().load_dictionary(self.read_text(source))
        dictionary.set_patterns(self.get_patterns())
        self.wordlist_source = source
        self.log.debug("loaded %d words from %r", len(dictionary), source)
        return dictionary

    def pre_run(self, func: Callable[[], int | None]) -> None:
        if not getattr(func, "no_wordlist", False):
            self.dictionary = self.load_dictionary()

    @arg.json
    @arg.words
    def word__check(self) -> None:
        """Check the spelling of words"""
        result = [{"word": word, "correct": self.dictionary.spell_check(word)} for word in self.args.words]
        self.print_response(result, json=self.args.json, table_layout=["word", "correct"])

    @arg.json
    @arg.limit
    @arg.max_distance
    @arg.word
    def word__suggest(self) -> None:
        """Suggest replacements for a word"""
        word = self.args.word
        suggestions = self.dictionary.get_suggestions(word, limit=self.args.limit, max_distance=self.args.max_distance)
        result = [
            {"suggestion": suggestion, "distance": distance(word.lower(), suggestion.lower())}
            for suggestion in suggestions
        ]
        self.print_response(result, json=self.args.json, table_layout=["suggestion", "distance"])

    @arg.json
    @arg.limit
    @arg.max_distance
    @arg.words
    def word__lookup(self) -> None:
        """Check words and suggest replacements for the misspelled ones"""
        result = []
        for word in self.args.words:
            checked = self.dictionary.check_and_suggest(word, limit=self.args.limit, max_distance=self.args.max_distance)
            result.append({"word": word, "misspelled": checked.misspelled, "suggestions": checked.suggestions})
        self.print_response(result, json=self.args.json, table_layout=[["word", "misspelled"], "suggestions"])

    @no_wordlist
    @arg.json
    @arg("source", help="Source string")
    @arg("target", help="Target string")
    def word__distance(self) -> None:
        """Damerau-Levenshtein distance between two strings"""
        result = {
            "source": self.args.source,
            "target": self.args.target,
            "distance": distance(self.args.source, self.args.target),
        }
        self.print_response(
            result, json=self.args.json, single_item=True, table_layout=["source", "target", "distance"]
        )

    @no_wordlist
    @arg("file", help="Raw word list file or http(s) URL")
    @arg("-o", "--output", help="Write the normalized word list to FILE instead of stdout", metavar="FILE")
    def wordlist__normalize(self) -> None:
        """Strip byte-order mark, carriage returns and empty lines, then sort"""
        normalized = self.get_service().normalize_dictionary(self.read_text(self.args.file))
        text = normalized + "\n" if normalized else ""
        if self.args.output:
            with open(self.args.output, "w", encoding="utf-8") as fp:
                fp.write(text)
            self.log.info("Wrote %d words to %r", text.count("\n"), self.args.output)
        else:
            print(text, end="")

    @arg.json
    def wordlist__info(self) -> None:
        """Show the loaded word list"""
        result = {
            "source": self.wordlist_source,
            "words": len(self.dictionary),
            "search_radius": self.dictionary.search_radius,
            "sensitivity": self.get_sensitivity(),
        }
        self.print_response(result, json=self.args.json, single_item=True, table_layout=WORDLIST_INFO_COLUMNS)


if __name__ == "__main__":
    DictSpellCLI().main()
