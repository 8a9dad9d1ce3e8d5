import re
import sys

from . import usage
from .exceptions import ConfigurationError, Exit, ParseError
from .parser import Parser, Registry
from .util import debug


class Metadata(object):
    """
    Descriptive program details shown in usage output.

    None of this affects parsing. ``name`` is always upper-cased; ``version``
    is a ``(major, minor, revision, build)`` tuple.
    """
    def __init__(self, name="", name_long_form="", company_name="",
        version=(0, 0, 0, 0), author="", description="", build_date="",
        example_text=""):
        self.name = name.upper()
        self.name_long_form = name_long_form
        self.company_name = company_name
        self.version = tuple(version)
        self.author = author
        self.description = description
        self.build_date = build_date
        self.example_text = example_text

    @property
    def version_string(self):
        return ".".join(str(x) for x in self.version)


def program_name(path):
    """
    Strip any directory (``/`` or ``\\`` separated) from ``path``.
    """
    return re.split(r"[\\/]", path)[-1]


class ArgumentHelper(object):
    """
    Declares a program's arguments, parses argv into them and explains them.

    Typical use::

        helper = ArgumentHelper(description="Poke a thread.")
        thread = helper.declare_positional("threadId", "Thread to poke", unsigned)
        delay = helper.declare_keyed("t", "delay", "Milliseconds to wait", int)
        helper.declare_flag("B", "Boost priority")
        values = helper.run()
        print(values.threadId, delay.value)

    `run` is the only place that ever exits the process; `parse` raises
    instead, for callers (and tests) wanting to handle errors themselves.

    :param str version:
        Four dot-separated numbers, e.g. ``"1.2.0.17"``. See `set_version`.
    :param out_stream:
        Where help output goes. Defaults to `sys.stdout` at write time.
    :param err_stream:
        Where diagnostics and error usage go. Defaults to `sys.stderr` at
        write time.

    Remaining keyword arguments fill in the matching `Metadata` fields.
    """
    def __init__(self, name="", name_long_form="", company_name="",
        version=None, author="", description="", build_date="",
        example_text="", out_stream=None, err_stream=None):
        self.out_stream = out_stream
        self.err_stream = err_stream
        self.registry = Registry(err_stream=err_stream)
        self.metadata = Metadata(
            name=name,
            name_long_form=name_long_form,
            company_name=company_name,
            author=author,
            description=description,
            build_date=build_date,
            example_text=example_text,
        )
        if version is not None:
            self.set_version(version)
        self.argv = None
        self.values = None

    # Declarations

    def declare_flag(self, *args, **kwargs):
        return self.registry.declare_flag(*args, **kwargs)

    def declare_positional(self, *args, **kwargs):
        return self.registry.declare_positional(*args, **kwargs)

    def declare_optional_positional(self, *args, **kwargs):
        return self.registry.declare_optional_positional(*args, **kwargs)

    def declare_keyed(self, *args, **kwargs):
        return self.registry.declare_keyed(*args, **kwargs)

    def declare_keyed_string_list(self, *args, **kwargs):
        return self.registry.declare_keyed_string_list(*args, **kwargs)

    def declare_overflow_list(self, *args, **kwargs):
        return self.registry.declare_overflow_list(*args, **kwargs)

    # Metadata

    def set_name(self, name):
        self.metadata.name = name.upper()

    def set_name_long_form(self, name):
        self.metadata.name_long_form = name

    def set_company_name(self, company):
        self.metadata.company_name = company

    def set_version(self, version):
        """
        Set the version from a ``"major.minor.revision.build"`` string.

        Anything else is reported as a `.ConfigurationError` and ignored.
        """
        match = re.match(r"^\s*(\d+)\.(\d+)\.(\d+)\.(\d+)\s*$", version)
        if match is None:
            msg = "\nError: Version string improperly formatted. Should be four numbers,\nseparated by '.' Example: \"0.1.023.1020\"\n" # noqa
            self.registry.report(ConfigurationError(msg))
            return
        self.metadata.version = tuple(int(x) for x in match.groups())

    def set_author(self, author):
        self.metadata.author = author

    def set_description(self, description):
        self.metadata.description = description

    def set_build_date(self, date):
        self.metadata.build_date = date

    def set_example_text(self, text):
        self.metadata.example_text = text

    # Parsing

    def normalize_argv(self, argv):
        """
        Massages ``argv`` into a useful list of strings.

        **If None** (the default), uses `sys.argv`.

        **If a non-string iterable**, uses that in place of `sys.argv`.

        **If a string**, performs a `str.split` and then executes with the
        result. (This is mostly a convenience; when in doubt, use a list.)

        Sets ``self.argv`` to the result.
        """
        if argv is None:
            argv = sys.argv
            debug("argv was None; using sys.argv: {!r}".format(argv))
        elif isinstance(argv, str):
            argv = argv.split()
            debug("argv was string-like; splitting: {!r}".format(argv))
        self.argv = list(argv)

    def parse(self, argv=None):
        """
        Parse ``argv`` (program path first) into the declared arguments.

        Sets the display name from the program path, then binds everything
        else. Returns (and stores as ``values``) the resulting
        `.ParseResult`; raises `.HelpRequested` or a `.ParseError` otherwise.
        """
        self.normalize_argv(argv)
        if self.argv:
            self.set_name(program_name(self.argv[0]))
        parser = Parser(self.registry)
        self.values = parser.parse_argv(self.argv[1:])
        return self.values

    def run(self, argv=None, exit=True):
        """
        Parse ``argv``, handling help requests and errors like a CLI should.

        Help output goes to ``out_stream`` with exit code 0; parse errors are
        printed, followed by full usage, to ``err_stream`` with exit code 1.

        :param bool exit:
            When ``False`` (default: ``True``), never calls `sys.exit`; the
            exception is logged and ``None`` returned instead.

            .. note::
                This is mostly a concession to testing.
        """
        try:
            return self.parse(argv)
        except (Exit, ParseError) as e:
            debug("Received a possibly-skippable exception: {!r}".format(e))
            if isinstance(e, Exit):
                self.write_usage(self.out_stream or sys.stdout)
                code = e.code
            else:
                err = self.err_stream or sys.stderr
                print(e, file=err)
                self.write_usage(err)
                code = 1
            if exit:
                sys.exit(code)
            debug("Invoked as run(..., exit=False), ignoring exception")

    # Rendering

    def write_usage(self, out=None):
        usage.write_usage(self.metadata, self.registry, out or sys.stdout)

    def write_values(self, out=None):
        usage.write_values(self.registry, out or sys.stdout)

    def usage(self):
        return usage.usage(self.metadata, self.registry)
