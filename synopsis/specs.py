"""
Synopsis specifications: options and command entries.

Overview
- Specs
  • Option: a named switch with one or more aliases (e.g., -o/--output), an optional
    description and an ordered list of argument placeholders it consumes.
  • Entry: a named subcommand with a description, positional placeholders and the
    options attached to it (in declaration order).

- Introspection & representation
  • SpecType metaclass provides stable __repr__/__rich_repr__/__eq__/__copy__ and
    exposes the fields declared in __introspectable__ as read-only properties.
  • Read-only properties hand out copies; mutating them never touches the stored state.

Validation highlights
- Option aliases: at least one, every alias a non-empty string, order preserved,
  duplicates allowed.
- Entry names: non-empty strings.
- Placeholders: non-empty strings.
- Every mutator checks before it writes, so a failing call leaves the option or entry untouched.

Value semantics
- Entry.add_option stores a copy of the option; the Usage aggregate does the same
  for options and entries. Later changes to the original never leak into the holder.

Quick example:
    >>> from synopsis import Option, Entry
    >>> level = Option("-l", "--level", description="Verbosity level.")
    >>> level.add_arg("n")
    >>> run = Entry("run", "Runs the thing.")
    >>> run.add_arg("file")
    >>> run.add_option(level)
    >>> run.usage
    'run <file>'

Public API
- Classes: Option, Entry
"""
import functools
import operator
import re

from .faults import *
from .formatting import format_placeholders
from .utils import *
from .utils import _immortalize


class SpecType(type):
    """
    Metaclass that turns model classes into introspectable value types.

    Responsibilities
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__ (backed by "_<name>" attributes),
      unless the class body already defines an accessor under that name.
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics
      and rich.pretty output.
    - Provide __eq__ (same type, same introspectable fields) and __copy__
      (fresh backing containers, nested specs copied too).

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ()) if name not in namespace
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with every introspectable field.

            Example
            - option(aliases=['-v', '--verbose'], description='', args=[])
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers.
            """
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        @rename("__eq__")
        def __eq__(self, other):
            if type(other) is not type(self):
                return NotImplemented
            return all(
                getattr(self, "_" + name) == getattr(other, "_" + name)
                for name in type(self).__introspectable__
            )
        self.__eq__ = __eq__
        self.__hash__ = None

        @rename("__copy__")
        def __copy__(self):
            """
            Return an independent copy whose backing containers are not shared.
            """
            clone = object.__new__(type(self))
            for name in type(self).__introspectable__:
                setattr(clone, "_" + name, _immortalize(getattr(self, "_" + name)))
            return clone
        self.__copy__ = __copy__

        return self


def _check_placeholder(placeholder):
    # Shared by every add_arg: validate before anything is appended.
    if not isinstance(placeholder, str):
        raise TypeError("arg must be a string")
    if not placeholder:
        raise EmptyArgError("arg string must not be empty")


def _check_name(cls, name):
    if not isinstance(name, str):
        raise TypeError(f"{cls.__typename__} name must be a string")
    if not name:
        raise EmptyNameError("name string must not be empty")


def _check_description(cls, description):
    if not isinstance(description, str):
        raise TypeError(f"{cls.__typename__} description must be a string")


class Option(metaclass=SpecType):
    """
    Named switch specification.

    Highlights
    - aliases: the invocation names (short and long forms), in the given order.
    - description: free text shown in per-command help (may be empty).
    - args: ordered placeholder labels the option consumes, rendered as <label>.

    Properties
    - The names listed in __introspectable__ are exposed as read-only attributes.
    - usage renders the invocation line, e.g. "-l,--level <n>".
    """

    __introspectable__ = (
        "aliases",
        "description",
        "args",
    )

    def __init__(self, *aliases, description=""):
        """
        Construct an Option.

        Parameters
        - aliases: str
          One or more non-empty invocation names.
        - description: str
          Help text; empty by default.

        Raises
        - NoAliasError: when no alias is given.
        - EmptyAliasError: when any alias is an empty string.
        - TypeError: when an alias or the description is not a string.
        """
        if not aliases:
            raise NoAliasError("option must have at least one alias")
        for alias in aliases:
            if not isinstance(alias, str):
                raise TypeError(f"{type(self).__typename__} aliases must be strings")
            if not alias:
                raise EmptyAliasError("alias string must not be empty")
        _check_description(type(self), description)

        self._aliases = list(aliases)
        self._description = description
        self._args = []

    def add_arg(self, placeholder, /):
        """
        Append an argument placeholder.

        Raises
        - EmptyArgError: when placeholder is an empty string (args unchanged).
        """
        _check_placeholder(placeholder)
        self._args.append(placeholder)

    @property
    def usage(self):
        line = ",".join(self._aliases)
        if self._args:
            line += " " + format_placeholders(self._args)
        return line


class Entry(metaclass=SpecType):
    """
    Named subcommand specification.

    Highlights
    - name: the command word (non-empty).
    - description: free text, wrapped in the Commands listing (may be empty).
    - args: ordered positional placeholders.
    - options: attached options, in declaration order (stored as copies).

    Properties
    - usage renders the Commands-listing line, e.g. "run <file>".
    """

    __introspectable__ = (
        "name",
        "description",
        "args",
        "options",
    )

    def __init__(self, name, description=""):
        """
        Construct an Entry.

        Raises
        - EmptyNameError: when name is an empty string.
        - TypeError: when name or description is not a string.
        """
        _check_name(type(self), name)
        _check_description(type(self), description)

        self._name = name
        self._description = description
        self._args = []
        self._options = []

    def add_arg(self, placeholder, /):
        """
        Append a positional placeholder.

        Raises
        - EmptyArgError: when placeholder is an empty string (args unchanged).
        """
        _check_placeholder(placeholder)
        self._args.append(placeholder)

    def add_option(self, option=Unset, /):
        """
        Attach a copy of an option.

        Raises
        - MissingOptionError: when no option (or None) is supplied.
        - TypeError: when the object is not an Option.
        """
        if option is Unset or option is None:
            raise MissingOptionError("no option provided")
        if not isinstance(option, Option):
            raise TypeError(f"{type(self).__typename__} options must be Option instances")
        self._options.append(option.__copy__())

    @property
    def usage(self):
        line = self._name
        if self._args:
            line += " " + format_placeholders(self._args)
        return line


__all__ = (
    "Option",
    "Entry",
)
