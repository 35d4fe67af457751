"""
Synopsis usage layer: the program root and its help renderers.

What this module provides
- Usage: the root aggregate. It names the program and holds root options plus
  either root positional placeholders or named command entries (never both).
  • render(): the program help (summary block and, when commands exist, the
    Commands listing).
  • lookup(name): the help of one command (summary, description, Options listing).
  • show(...): print either of them through a rich console, verbatim.

Layout contract of render()
    Usage:
        <prog> [<command>] [[options]] [<args>] [Run `<prog> <command> --help` ...]

    Commands:
        <name> <arg1> <arg2>
            <description wrapped at 64 columns>

- The summary is wrapped at 68 columns and indented 4 spaces.
- Commands are listed in name order, each block followed by one blank line.
- Without commands the text ends right after the summary block.

Duplicate command names
- duplicates="replace" (default): the later entry silently replaces the earlier one.
- duplicates="warn": same, but a DuplicateEntryWarning is emitted.
- duplicates="reject": DuplicateEntryError is raised and nothing is stored.

Threading
- A Usage is not safe for concurrent mutation. Once built, concurrent reads and
  renders are safe because rendering never writes to the aggregate.

Quick start
    from synopsis import Usage, Entry, Option

    usage = Usage("app")
    usage.add_option(Option("-q", "--quiet", description="Print less."))
    run = Entry("run", "Runs the thing.")
    run.add_arg("file")
    usage.add_entry(run)
    print(usage.render())
"""
from rich.console import Console

from .faults import *
from .formatting import *
from .specs import Entry, Option, SpecType, _check_name, _check_placeholder
from .utils import *

_POLICIES = ("replace", "warn", "reject")


class Usage(metaclass=SpecType):
    """
    Root aggregate for a program's usage.

    Responsibilities
    - Holds the program name, root options, and either root args or entries.
    - Enforces the root-args/entries exclusivity at mutation time; every mutator
      validates before writing, so failures leave the aggregate unchanged.
    - Stores copies of every option and entry it is given.

    Properties
    - name, duplicates, args, options: read-only copies.
    - entries: copies of the registered entries, sorted by name.
    - layout: "args" or "commands" once either kind was added, None before.
    """

    __introspectable__ = (
        "name",
        "duplicates",
        "args",
        "options",
        "entries",
    )

    def __init__(self, name, *, duplicates="replace"):
        """
        Construct an empty Usage.

        Parameters
        - name: str
          Program name (non-empty).
        - duplicates: "replace" | "warn" | "reject"
          Policy for add_entry when an entry with the same name is already stored.

        Raises
        - EmptyNameError: when name is an empty string.
        - ValueError: when duplicates is not a known policy.
        """
        _check_name(type(self), name)
        if duplicates not in _POLICIES:
            raise ValueError(f"{type(self).__typename__} 'duplicates' must be one of {", ".join(map(repr, _POLICIES))}")

        self._name = name
        self._duplicates = duplicates
        self._args = []
        self._options = []
        self._entries = {}

    @property
    def entries(self):
        return [self._entries[name].__copy__() for name in sorted(self._entries)]

    @property
    def layout(self):
        if self._entries:
            return "commands"
        if self._args:
            return "args"
        return None

    def add_arg(self, placeholder, /):
        """
        Append a root positional placeholder.

        Raises
        - EmptyArgError: when placeholder is an empty string.
        - ExistingEntriesError: when entries are already registered.
        """
        _check_placeholder(placeholder)
        if self._entries:
            raise ExistingEntriesError("cannot use global args with subcommands")
        self._args.append(placeholder)

    def add_option(self, option=Unset, /):
        """
        Attach a copy of a root option.

        Raises
        - MissingOptionError: when no option (or None) is supplied.
        """
        if option is Unset or option is None:
            raise MissingOptionError("no option provided")
        if not isinstance(option, Option):
            raise TypeError(f"{type(self).__typename__} options must be Option instances")
        self._options.append(option.__copy__())

    def add_entry(self, entry=Unset, /):
        """
        Register a copy of an entry under its name.

        Raises
        - MissingEntryError: when no entry (or None) is supplied.
        - ExistingArgsError: when root args are already registered.
        - DuplicateEntryError: when the name is taken and duplicates="reject".
        """
        if entry is Unset or entry is None:
            raise MissingEntryError("no entry provided")
        if not isinstance(entry, Entry):
            raise TypeError(f"{type(self).__typename__} entries must be Entry instances")
        if self._args:
            raise ExistingArgsError("cannot use subcommands with global args")

        if (name := entry.name) in self._entries:
            match self._duplicates:
                case "reject":
                    raise DuplicateEntryError(f"entry name {name!r} is already in use")
                case "warn":
                    warn(DuplicateEntryWarning(f"entry {name!r} replaces a previously added entry", prog=self._name))

        self._entries[name] = entry.__copy__()

    def render(self):
        """
        Render the program help text.
        """
        summary = self._name
        if self._entries:
            summary += " <command>"
        if self._options:
            summary += " [options]"
        if self._args:
            summary += " <args>"
        if self._entries:
            # Joined before wrapping, so a line may straddle both sentences.
            summary += f" Run `{self._name} <command> --help` for more information on a command."

        rendered = "Usage:\n" + indent(chop_single_paragraph(summary, SUMMARY_WIDTH), INDENT)
        if not self._entries:
            return rendered

        rendered += "\nCommands:\n"
        for name in sorted(self._entries):
            entry = self._entries[name]
            rendered += indent([entry.usage], INDENT)
            if description := entry.description:
                rendered += indent(chop_multiple_paragraphs(description, DESCRIPTION_WIDTH), 2 * INDENT)
            rendered += "\n"
        return rendered

    def lookup(self, name, /):
        """
        Render the help text of a single command.

        Raises
        - UnknownEntryError: when no entry is registered under name.
        """
        try:
            entry = self._entries[name]
        except (KeyError, TypeError):
            raise UnknownEntryError(f"unknown command {name!r}", prog=self._name) from None

        options = entry.options
        summary = f"{self._name} {entry.name}"
        if options:
            summary += " [options]"
        if entry.args:
            summary += " <args>"

        rendered = "Usage:\n" + indent(chop_single_paragraph(summary, SUMMARY_WIDTH), INDENT)
        if lines := chop_multiple_paragraphs(entry.description, SUMMARY_WIDTH):
            rendered += "\n" + indent(lines, INDENT)
        if not options:
            return rendered

        rendered += "\nOptions:\n"
        for option in options:
            rendered += indent([option.usage], INDENT)
            if description := option.description:
                rendered += indent(chop_multiple_paragraphs(description, DESCRIPTION_WIDTH), 2 * INDENT)
            rendered += "\n"
        return rendered

    def show(self, name=Unset, /, *, stderr=False, file=Unset):
        """
        Print the program help (or the help of command `name`) verbatim.

        The text is printed without markup, highlighting, emoji or re-wrapping, so the
        console reproduces render()/lookup() byte for byte.
        """
        text = self.render() if name is Unset else self.lookup(name)
        console = Console(stderr=stderr) if file is Unset else Console(file=file)
        console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True, end="")

    def __str__(self):
        return self.render()


__all__ = (
    "Usage",
)
