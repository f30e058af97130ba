"""Centralized Lox source cases used across scanner tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, cast


@dataclass(frozen=True, slots=True)
class LoxCase:
    name: str
    source: str
    should_scan_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


SCANNER_CASES: tuple[LoxCase, ...] = (
    LoxCase(name="empty_source", source=""),
    LoxCase(name="whitespace_only", source=" \t\r\n \n\t"),
    LoxCase(name="arithmetic", source="1+2"),
    LoxCase(
        name="variable_declarations",
        source=_dedent(
            """
            var greeting = "hello";
            var answer = 42;
            var ratio = 0.75;
            """
        ),
    ),
    LoxCase(
        name="class_with_methods",
        source=_dedent(
            """
            class Breakfast < Meal {
              cook() {
                print "Eggs a-fryin'!";
              }

              serve(who) {
                return "Enjoy your breakfast, " + who + ".";
              }
            }
            """
        ),
    ),
    LoxCase(
        name="control_flow",
        source=_dedent(
            """
            for (var i = 0; i < 10; i = i + 1) {
              if (i >= 5 and !(i == 7)) print i; else print nil;
            }
            while (true or false) { this.x = super.y; }
            """
        ),
    ),
    LoxCase(
        name="comments_everywhere",
        source=_dedent(
            """
            // leading comment
            fun add(a, b) { // trailing comment
              return a + b; // another
            }
            // final comment without newline"""
        ),
    ),
    LoxCase(name="multiline_string", source='var poem = "roses\nare\nred";\n'),
    LoxCase(name="dense_operators", source="!=!==<=<>=>/ /* - + , . ;"),
    LoxCase(name="number_then_dot", source="9.foo(); 12.5.round;"),
    LoxCase(name="unexpected_characters", source="var a = 1 @ 2 # 3;\n", should_scan_cleanly=False),
    LoxCase(name="unterminated_string", source='print "never closed;\n', should_scan_cleanly=False),
    LoxCase(name="non_ascii_in_string", source='print "Jåhkåmåhkke";'),
    LoxCase(name="non_ascii_outside_string", source="var ö = 1;", should_scan_cleanly=False),
)

type CaseName = Literal[
    "empty_source",
    "whitespace_only",
    "arithmetic",
    "variable_declarations",
    "class_with_methods",
    "control_flow",
    "comments_everywhere",
    "multiline_string",
    "dense_operators",
    "number_then_dot",
    "unexpected_characters",
    "unterminated_string",
    "non_ascii_in_string",
    "non_ascii_outside_string",
]

CASE_BY_NAME: dict[CaseName, LoxCase] = cast(
    dict[CaseName, LoxCase],
    {case.name: case for case in SCANNER_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: LoxCase) -> str:
    return case.name
