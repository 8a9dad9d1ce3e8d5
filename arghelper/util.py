import logging
import os


LOG_FORMAT = "%(name)s.%(module)s.%(funcName)s: %(message)s"


def enable_logging():
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


# Allow from-the-start debugging via shell env var.
if os.environ.get("ARGHELPER_DEBUG"):
    enable_logging()

# Add top level logger functions to global namespace. Meh.
log = logging.getLogger("arghelper")
for x in ("debug",):
    globals()[x] = getattr(log, x)


def text_wrap(text, out, width, indent=""):
    """
    Write ``text`` to ``out``, word-wrapped so lines stay within ``width``.

    Words are whatever `str.split` yields; each one is written followed by a
    single space. Every line (including the first) starts with ``indent``, and
    the output always ends with a newline - so an empty ``text`` still emits
    ``indent`` plus ``"\\n"``.
    """
    out.write(indent)
    length = 0
    for word in text.split():
        # Never break before the first word of a line.
        if length and length + len(word) + 1 > width:
            out.write("\n" + indent)
            length = 0
        out.write(word + " ")
        length += len(word) + 1
    out.write("\n")
