import logging


# pytest seems to tweak logging such that our debug logs go to stderr, which
# is then hella spammy. So, we explicitly turn default logging back down.
logging.basicConfig(level=logging.INFO)
