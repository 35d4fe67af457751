"""
Synopsis faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every usage-building issue.
  Codes are grouped by domain so logs and searches stay predictable.
- UsageException / UsageWarning: base types that carry message + options and
  know how to render themselves for rich in a short, actionable way.
- report(): print any fault to stderr (respecting colorful).

Every concrete exception also derives from the builtin that best describes it
(ValueError for bad values, TypeError for missing pieces, LookupError for
unknown names), so callers can catch either the library type or the builtin.

Integration
- Model mutators raise these faults directly; nothing is half-applied when they do.
- Front-ends that want friendly output catch UsageException and call report(fault).
"""
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the package (stable identifiers).

    grouping (by high-level domain)
    - placeholders (2110x)
      • EMPTY_ARG
    - options (2111x)
      • NO_ALIAS, EMPTY_ALIAS
    - names (2112x)
      • EMPTY_NAME
    - missing children (2113x)
      • MISSING_OPTION, MISSING_ENTRY
    - layout conflicts (2114x)
      • EXISTING_ARGS, EXISTING_ENTRIES, DUPLICATE_ENTRY
    - lookups (2115x)
      • UNKNOWN_ENTRY
    - warnings (22xxx)
      • DUPLICATE_ENTRY_WARNING
    """
    # --- placeholder errors (21xxx) ---
    EMPTY_ARG                   = 21101

    # --- option errors (21xxx) ---
    NO_ALIAS                    = 21111
    EMPTY_ALIAS                 = 21112

    # --- name errors (21xxx) ---
    EMPTY_NAME                  = 21121

    # --- missing children (21xxx) ---
    MISSING_OPTION              = 21131
    MISSING_ENTRY               = 21132

    # --- layout conflicts (21xxx) ---
    EXISTING_ARGS               = 21141
    EXISTING_ENTRIES            = 21142
    DUPLICATE_ENTRY             = 21143

    # --- lookups (21xxx) ---
    UNKNOWN_ENTRY               = 21151

    # --- warnings (22xxx) ---
    DUPLICATE_ENTRY_WARNING     = 22143

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(fault, palette):
    # Shared rich layout for exceptions and warnings: header, message, hint.
    main = __import__("__main__")
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), styles[style])

    prog = getattr(main, "__prog__", fault.options.get("prog", "usage"))

    header = Text.assemble(
        "[ ",
        text(prog, "prog-name"),
        " — ",
        text(fault.code.normalize(), "code"),
        " | ",
        text(fault.title.title(), "title"),
        " ]"
    )
    message = text(fault.message, "message")
    hint = Text.assemble(text(" → ", "hint-arrow"), text(fault.hint, "hint"))
    return Group(header, message, hint)


class UsageException(Exception):
    """
    base type for every usage-building error.

    subclasses declare __code__, __title__ and __hint__; any of them can be
    overridden per raise through options (code=..., title=..., hint=...).
    """
    __code__ = Unset
    __title__ = "usage error"
    __hint__ = ""

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code", type(self).__code__)

    @property
    def title(self):
        return self.options.get("title", type(self).__title__)

    @property
    def hint(self):
        return self.options.get("hint", type(self).__hint__)

    def __str__(self):
        return "usage: " + str(self.message) if self.message else "usage"

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "title": "bold #FF4DA6",  # friendly pinky title
            "message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        })

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class EmptyArgError(UsageException, ValueError):
    __code__ = FaultCode.EMPTY_ARG
    __title__ = "empty argument"
    __hint__ = "give the placeholder a label, e.g. add_arg(\"file\")"


class NoAliasError(UsageException, TypeError):
    __code__ = FaultCode.NO_ALIAS
    __title__ = "missing alias"
    __hint__ = "pass at least one alias, e.g. Option(\"-v\", \"--verbose\")"


class EmptyAliasError(UsageException, ValueError):
    __code__ = FaultCode.EMPTY_ALIAS
    __title__ = "empty alias"
    __hint__ = "remove the empty string from the aliases"


class EmptyNameError(UsageException, ValueError):
    __code__ = FaultCode.EMPTY_NAME
    __title__ = "empty name"
    __hint__ = "names identify programs and commands, they cannot be blank"


class MissingOptionError(UsageException, TypeError):
    __code__ = FaultCode.MISSING_OPTION
    __title__ = "missing option"
    __hint__ = "build the option first with Option(...)"


class MissingEntryError(UsageException, TypeError):
    __code__ = FaultCode.MISSING_ENTRY
    __title__ = "missing entry"
    __hint__ = "build the entry first with Entry(...)"


class ExistingArgsError(UsageException, ValueError):
    __code__ = FaultCode.EXISTING_ARGS
    __title__ = "existing arguments"
    __hint__ = "a program takes either root arguments or commands, not both"


class ExistingEntriesError(UsageException, ValueError):
    __code__ = FaultCode.EXISTING_ENTRIES
    __title__ = "existing commands"
    __hint__ = "attach the argument to one of the commands instead"


class DuplicateEntryError(UsageException, ValueError):
    __code__ = FaultCode.DUPLICATE_ENTRY
    __title__ = "duplicate command"
    __hint__ = "rename the command or build the usage with duplicates=\"replace\""


class UnknownEntryError(UsageException, LookupError):
    __code__ = FaultCode.UNKNOWN_ENTRY
    __title__ = "unknown command"
    __hint__ = "check the spelling against the commands listed in the help"


class UsageWarning(UserWarning):
    """
    base type for non-fatal usage-building diagnostics (emitted via warnings.warn).
    """
    __code__ = Unset
    __title__ = "usage warning"
    __hint__ = ""

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType(options)

    code = UsageException.code
    title = UsageException.title
    hint = UsageException.hint

    def __rich__(self):
        return _render(self, {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #FFB400",  # amber fault code for warnings
            "title": "bold #FFC2E0",  # softer pinky title for warnings
            "message": "#D6D6DE",  # slightly lighter gray body
            "hint-arrow": "#B8EFAF dim",  # softer green arrow
            "hint": "italic #B8EFAF",  # softer green hint text
        })

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateEntryWarning(UsageWarning):
    __code__ = FaultCode.DUPLICATE_ENTRY_WARNING
    __title__ = "replaced command"
    __hint__ = "build the usage with duplicates=\"reject\" to turn this into an error"


def report(fault, /, *, file=Unset, **options):
    """
    print a fault (exception or warning) with the given rendering options.

    contract
    - fault must be a UsageException or a UsageWarning.
    - options are merged into the fault via __replace__ before rendering
      (typical ones: prog, colorful, hint).
    - output goes to the module console (stderr) unless a file is given.
    """
    if not isinstance(fault, UsageException | UsageWarning):
        raise TypeError("report() argument must be a usage exception or warning")
    fault = fault.__replace__(**options) if options else fault
    (console if file is Unset else Console(file=file)).print(fault)


def warn(fault, /, stacklevel=2):
    """
    emit a usage warning through the warnings machinery (filterable by category).
    """
    if not isinstance(fault, UsageWarning):
        raise TypeError("warn() argument must be a usage warning")
    warnings.warn(fault, stacklevel=stacklevel + 1)


__all__ = (
    "UsageException",
    "EmptyArgError",
    "NoAliasError",
    "EmptyAliasError",
    "EmptyNameError",
    "MissingOptionError",
    "MissingEntryError",
    "ExistingArgsError",
    "ExistingEntriesError",
    "DuplicateEntryError",
    "UnknownEntryError",
    "UsageWarning",
    "DuplicateEntryWarning",
    "FaultCode",
    "report",
    "warn",
)
