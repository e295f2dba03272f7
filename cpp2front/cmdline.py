"""Command line flag registration and matching."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import combinations
from typing import Callable, Iterable, TextIO

PROCESSED = -1


@dataclass
class CmdlineArg:
    """A command line argument with its original position."""

    pos: int
    text: str


@dataclass
class Flag:
    """A registered command line switch."""

    group: int
    name: str
    description: str
    handler: Callable[[], None]
    synonym: str = ""
    unique_prefix: int = 0


class CmdlineProcessor:
    """Holds registered flags and the arguments, and matches one against the other."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.flags: list[Flag] = []
        self.args: list[CmdlineArg] = []
        self.max_flag_length = 0
        self.help_requested = False

    def _print(self, text: str, width: int = 0) -> None:
        self.out.write(text.ljust(width))

    def add_flag(
        self,
        group: int,
        name: str,
        description: str,
        handler: Callable[[], None],
        synonym: str = "",
    ) -> None:
        self.flags.append(Flag(group, name, description, handler, synonym))
        self.max_flag_length = max(self.max_flag_length, len(name))

    def set_args(self, argv: Iterable[str]) -> None:
        """Record arguments (excluding the program name), numbered from 1."""
        self.args.extend(CmdlineArg(pos, text) for pos, text in enumerate(argv, start=1))

    def process_flags(self) -> None:
        """Run the handler of each matching switch and drop matched arguments."""
        for first, second in combinations(self.flags, 2):
            common = 0
            for a, b in zip(first.name, second.name):
                if a != b:
                    break
                common += 1
            first.unique_prefix = max(first.unique_prefix, common + 1)
            second.unique_prefix = max(second.unique_prefix, common + 1)

        for arg in self.args:
            if not arg.text:
                continue
            if arg.text == "--":
                arg.pos = PROCESSED
                break
            for flag in self.flags:
                length = max(flag.unique_prefix, len(arg.text) - 1)
                stem = flag.name[:length]
                if (
                    arg.text.startswith("-" + stem)
                    or arg.text.startswith("/" + stem)
                    or arg.text == "-" + flag.synonym
                    or arg.text == "/" + flag.synonym
                ):
                    flag.handler()
                    arg.pos = PROCESSED
                    break

        self.args = [arg for arg in self.args if arg.pos != PROCESSED]

    def print_help(self) -> None:
        self.help_requested = True
        self.flags.sort(key=lambda f: (f.group, f.name))

        self._print("\nUsage: cpp2front [options] file ...\n\nOptions:\n")
        last_group = None
        for flag in self.flags:
            if last_group != flag.group:
                self._print("\n")
                last_group = flag.group
            self._print("  -")
            shown = flag.name[: flag.unique_prefix]
            if flag.unique_prefix < len(flag.name):
                shown += "[" + flag.name[flag.unique_prefix:] + "]"
            if flag.synonym:
                shown += ", -" + flag.synonym
            self._print(shown, self.max_flag_length + 3)
            self._print(flag.description)
            self._print("\n")

    def print_version(self) -> None:
        self.help_requested = True
        self._print("cpp2front 0.1.1 compiler\n")
        self._print("\nNote: This is a hilariously incomplete personal project.")
        self._print("\nIt's known to be incomplet and incorrekt, and it has lots of b")
        self._print("\nad formAt ting. Absolutely no warranty - try at your own risk.")
        self._print("\n")

    def help_was_requested(self) -> bool:
        return self.help_requested

    def arguments(self) -> list[CmdlineArg]:
        return self.args


def make_default_cmdline(out: TextIO | None = None) -> CmdlineProcessor:
    """Create a processor with the standard -help and -version flags registered."""
    proc = CmdlineProcessor(out)
    proc.add_flag(0, "help", "Print help", proc.print_help, "?")
    proc.add_flag(0, "version", "Print version information", proc.print_version)
    return proc