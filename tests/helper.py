import sys
from io import StringIO
from unittest.mock import patch

from pytest import raises
from pytest_relaxed import trap

from arghelper import (
    ArgumentHelper,
    ConfigurationError,
    HelpRequested,
    MissingRequiredArguments,
)
from arghelper.helper import program_name

from _util import thread_helper


FULL_USAGE = """Acme Thread Control Version 1.2.3.4 PROG
Copyright (c) J. Doe, 2020. All rights reserved.

Usage: PROG threadId priority [file_name] [/B] [/t delay] 


Description:
\tAdjusts a thread. 


Parameter list:
\tthreadId 
\t   Id of the thread to adjust. 

\tpriority 
\t   New priority. 

\t[file_name] 
\t   Log file. 

\t[/B] 
\t   Run in the background. 

\t[/t delay] 
\t   Milliseconds to wait. 


Example:
prog 543 21 /t 5000 /B
""" # noqa


def _documented():
    return thread_helper(
        company_name="Acme",
        name_long_form="Thread Control",
        version="1.2.3.4",
        author="J. Doe",
        build_date="2020",
        description="Adjusts a thread.",
        example_text="prog 543 21 /t 5000 /B",
    )


class program_name_:
    def strips_posix_directories(self):
        assert program_name("/usr/local/bin/threadctl") == "threadctl"

    def strips_windows_directories(self):
        assert program_name("C:\\tools\\tc.exe") == "tc.exe"

    def leaves_bare_names_alone(self):
        assert program_name("prog") == "prog"


class ArgumentHelper_:
    class parse:
        def binds_and_returns_values(self):
            helper = thread_helper()
            values = helper.parse(["prog", "543", "21", "/t", "5000", "/B"])
            assert values is helper.values
            assert values.threadId == 543
            assert values.priority == 21
            assert values.file_name == ""
            assert values.delay == 5000
            assert values.B is True

        def accepts_strings(self):
            values = thread_helper().parse("prog 1 2 out.log")
            assert values.file_name == "out.log"

        def uses_sys_argv_by_default(self):
            with patch.object(sys, "argv", ["prog", "1", "2"]):
                values = thread_helper().parse()
            assert values.priority == 2

        def derives_upper_cased_display_name(self):
            helper = thread_helper()
            helper.parse(["/usr/bin/threadctl", "1", "2"])
            assert helper.metadata.name == "THREADCTL"

        def raises_instead_of_exiting(self):
            with raises(MissingRequiredArguments):
                thread_helper().parse(["prog", "1"])
            with raises(HelpRequested):
                thread_helper().parse(["prog", "/?"])

        def writes_into_caller_storage_via_dest(self):
            store = {}
            helper = ArgumentHelper()
            helper.declare_keyed(
                "n", "count", "How many.", int,
                dest=lambda x: store.update(count=x),
            )
            helper.parse(["prog", "/n", "3"])
            assert store == {"count": 3}

    class run:
        @trap
        @patch("arghelper.helper.sys.exit")
        def help_prints_usage_to_stdout_and_exits_0(self, mock_exit):
            _documented().run("prog 1 /?")
            assert sys.stdout.getvalue() == FULL_USAGE
            assert sys.stderr.getvalue() == ""
            mock_exit.assert_called_with(0)

        @trap
        @patch("arghelper.helper.sys.exit")
        def errors_print_message_and_usage_to_stderr_and_exit_1(
            self, mock_exit
        ):
            _documented().run("prog 543")
            assert sys.stderr.getvalue() == (
                "Missing required arguments:\npriority\n" + FULL_USAGE
            )
            assert sys.stdout.getvalue() == ""
            mock_exit.assert_called_with(1)

        @trap
        @patch("arghelper.helper.sys.exit")
        def invalid_values_exit_1(self, mock_exit):
            thread_helper().run("prog 1 2 /t soon")
            stderr = sys.stderr.getvalue()
            assert stderr.startswith("Invalid argument: soon\n")
            assert "Usage: PROG" in stderr
            mock_exit.assert_called_with(1)

        @patch("arghelper.helper.sys.exit")
        def success_returns_values_without_exiting(self, mock_exit):
            values = thread_helper().run("prog 543 21 /t 5000 /B")
            assert values.delay == 5000
            assert not mock_exit.called

        @trap
        def exit_False_returns_None_on_error(self):
            assert thread_helper().run("prog", exit=False) is None
            assert "Missing required arguments" in sys.stderr.getvalue()

        def honors_explicit_streams(self):
            out, err = StringIO(), StringIO()
            helper = thread_helper(out_stream=out, err_stream=err)
            helper.run("prog /?", exit=False)
            helper.run("prog /nope", exit=False)
            assert out.getvalue().startswith("PROG\n")
            assert err.getvalue().startswith("/nope is an invalid parameter.\n")

    class write_values:
        def dumps_bound_values(self):
            helper = thread_helper()
            helper.parse("prog 543 21 /t 5000 /B")
            out = StringIO()
            helper.write_values(out)
            assert out.getvalue() == (
                "threadId : 543\npriority : 21\n[file_name] : \n[/B] : true\n[/t delay] : 5000\n" # noqa
            )

        def dumps_overflow_inline(self):
            helper = ArgumentHelper()
            helper.declare_positional("a", "A.")
            helper.declare_overflow_list("rest...", "Rest.")
            helper.parse("prog x y z")
            out = StringIO()
            helper.write_values(out)
            assert out.getvalue() == "a : x\ny z "

    class metadata:
        def version_string_sets_tuple(self):
            helper = ArgumentHelper(version="0.1.023.1020")
            assert helper.metadata.version == (0, 1, 23, 1020)
            assert helper.metadata.version_string == "0.1.23.1020"

        def malformed_version_is_a_configuration_error(self):
            err = StringIO()
            helper = ArgumentHelper(err_stream=err)
            helper.set_version("1.2.3.4")
            helper.set_version("1.2")
            assert helper.metadata.version == (1, 2, 3, 4)
            assert isinstance(
                helper.registry.config_errors[0], ConfigurationError
            )
            assert "improperly formatted" in err.getvalue()

        def setters_fill_in_usage(self):
            helper = ArgumentHelper()
            helper.set_name("tool")
            helper.set_company_name("Acme")
            helper.set_name_long_form("Toolbox")
            helper.set_version("2.0.0.1")
            helper.set_author("J. Doe")
            helper.set_build_date("May 2020")
            helper.set_description("Does things.")
            helper.set_example_text("tool /x")
            usage = helper.usage()
            assert usage.startswith(
                "Acme Toolbox Version 2.0.0.1 TOOL\nCopyright (c) J. Doe, May 2020. All rights reserved.\n" # noqa
            )
            assert "\tDoes things. \n" in usage
            assert usage.endswith("Example:\ntool /x\n")

    def duplicate_keys_are_reported_at_declaration(self):
        err = StringIO()
        helper = ArgumentHelper(err_stream=err)
        helper.declare_keyed("x", "one", "First.", int)
        second = helper.declare_keyed("x", "two", "Second.", int)
        assert "Two arguments are defined with the same key" in err.getvalue()
        assert helper.registry.keyed["x"] is second
