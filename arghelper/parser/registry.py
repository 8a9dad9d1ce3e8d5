import sys

from lexicon import Lexicon

from .._types import Kind, Setter
from ..exceptions import ConfigurationError
from ..util import debug
from .argument import Flag, Scalar, String, StringList


class Registry(object):
    """
    Every argument declared for one program, bucketed for dispatch.

    Keyed arguments (flags, ``/key value`` params, ``/key a b c`` lists) live
    in ``keyed``; positional ones live in the ordered ``required`` or
    ``optional`` lists. ``all`` holds everything in declaration order. At most
    one overflow list may be set to catch positional tokens beyond those.

    Declaration problems never raise; they become `.ConfigurationError`
    diagnostics written to ``err_stream`` (default: `sys.stderr`) and kept in
    ``config_errors``.
    """
    def __init__(self, err_stream=None):
        self.keyed = Lexicon()
        self.required = []
        self.optional = []
        self.all = []
        self.overflow = None
        self.overflow_arg_description = ""
        self.overflow_description = ""
        self.config_errors = []
        self.err_stream = err_stream

    def __repr__(self):
        return "<Registry: {} required, {} optional, keys {!r}>".format(
            len(self.required), len(self.optional), self.keys()
        )

    def keys(self):
        """
        Keys in display order (sorted, like the keyed map iterates).
        """
        return sorted(self.keyed)

    def keyed_args(self):
        return [self.keyed[x] for x in self.keys()]

    def positional_args(self):
        return self.required + self.optional

    def report(self, error):
        debug("Configuration error: {}".format(error))
        self.config_errors.append(error)
        (self.err_stream or sys.stderr).write(str(error))

    def add_keyed(self, arg):
        if arg.key in self.keyed:
            old = self.keyed[arg.key]
            msg = "\nError: Two arguments are defined with the same key, namely\n{} and \n{}\n" # noqa
            self.report(ConfigurationError(msg.format(old.usage(), arg.usage())))
        # Last declaration wins the key; the earlier one stays in self.all.
        self.keyed[arg.key] = arg
        self.all.append(arg)
        debug("Added keyed argument {!r}".format(arg))
        return arg

    def make(self, kind, **kwargs):
        if kind is str:
            return String(**kwargs)
        return Scalar(kind=kind, **kwargs)

    def declare_flag(self, key, description, dest: Setter = None,
        attr_name=None):
        arg = Flag(
            key=key,
            description=description,
            optional=True,
            dest=dest,
            attr_name=attr_name,
        )
        return self.add_keyed(arg)

    def declare_positional(self, arg_description, description,
        kind: Kind = str, dest: Setter = None, attr_name=None):
        arg = self.make(
            kind,
            arg_description=arg_description,
            description=description,
            dest=dest,
            attr_name=attr_name,
        )
        self.required.append(arg)
        self.all.append(arg)
        debug("Added required positional {!r}".format(arg))
        return arg

    def declare_optional_positional(self, arg_description, description,
        kind: Kind = str, dest: Setter = None, attr_name=None):
        arg = self.make(
            kind,
            arg_description=arg_description,
            description=description,
            optional=True,
            dest=dest,
            attr_name=attr_name,
        )
        self.optional.append(arg)
        self.all.append(arg)
        debug("Added optional positional {!r}".format(arg))
        return arg

    def declare_keyed(self, key, arg_description, description,
        kind: Kind = str, dest: Setter = None, attr_name=None):
        arg = self.make(
            kind,
            key=key,
            arg_description=arg_description,
            description=description,
            optional=True,
            dest=dest,
            attr_name=attr_name,
        )
        return self.add_keyed(arg)

    def declare_keyed_string_list(self, key, arg_description, description,
        dest: Setter = None, attr_name=None):
        arg = StringList(
            key=key,
            arg_description=arg_description,
            description=description,
            optional=True,
            dest=dest,
            attr_name=attr_name,
        )
        return self.add_keyed(arg)

    def declare_overflow_list(self, arg_description, description, dest=None):
        """
        Set the list receiving positional tokens no declared slot wants.

        Returns that list. ``dest`` may be a caller-owned list to append into;
        a fresh one is made otherwise. Only one overflow list is allowed - a
        second call reports a `.ConfigurationError` and keeps the first.
        """
        if self.overflow is not None:
            msg = "\nError: More than one list specified to store extra arguments.\n" # noqa
            self.report(ConfigurationError(msg))
            return self.overflow
        self.overflow = [] if dest is None else dest
        self.overflow_arg_description = arg_description
        self.overflow_description = description
        debug("Set overflow list for {!r}".format(arg_description))
        return self.overflow
