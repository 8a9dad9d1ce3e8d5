"""
Human-readable renderings of a `.Registry`: usage text and value dumps.

Both walk arguments in the same order: required positionals, optional
positionals, then keyed arguments sorted by key.
"""
import io

from .util import text_wrap


#: Column limit for the one-line usage summary.
SUMMARY_WIDTH = 70
#: Column limit for the program description.
DESCRIPTION_WIDTH = 60


def summary(metadata, registry):
    """
    Return the synthesized ``Usage: NAME ...`` line, unwrapped.
    """
    parts = ["Usage: {} ".format(metadata.name)]
    for arg in registry.positional_args() + registry.keyed_args():
        parts.append(arg.name_token())
    if registry.overflow is not None:
        parts.append(registry.overflow_arg_description)
    return "".join(parts)


def write_header(metadata, out):
    if metadata.company_name:
        out.write(metadata.company_name + " ")
    if metadata.name_long_form:
        out.write("{} Version {} ".format(
            metadata.name_long_form, metadata.version_string
        ))
    out.write(metadata.name + "\n")
    if metadata.author:
        out.write("Copyright (c) " + metadata.author)
        if metadata.build_date:
            out.write(", " + metadata.build_date)
        out.write(". All rights reserved.\n")
    out.write("\n")


def write_usage(metadata, registry, out):
    write_header(metadata, out)
    text_wrap(summary(metadata, registry), out, SUMMARY_WIDTH)
    if metadata.description:
        out.write("\n\nDescription:\n")
        text_wrap(metadata.description, out, DESCRIPTION_WIDTH, "\t")
    out.write("\n\nParameter list:\n")
    for arg in registry.positional_args():
        arg.write_usage(out)
        out.write("\n")
    for arg in registry.keyed_args():
        arg.write_usage(out)
        out.write("\n")
    if registry.overflow is not None:
        out.write("\t" + registry.overflow_arg_description + " \n")
        text_wrap(registry.overflow_description, out, 50, "\t   ")
        out.write("\n")
    if metadata.example_text:
        out.write("\nExample:\n")
        out.write(metadata.example_text + "\n")


def write_values(registry, out):
    for arg in registry.positional_args():
        out.write("{}: {}\n".format(arg.name_token(), arg.value_text()))
    # Extras run together on one line, straight into the keyed output.
    if registry.overflow is not None:
        for token in registry.overflow:
            out.write(token + " ")
    for arg in registry.keyed_args():
        out.write("{}: {}\n".format(arg.name_token(), arg.value_text()))


def usage(metadata, registry):
    out = io.StringIO()
    write_usage(metadata, registry, out)
    return out.getvalue()
