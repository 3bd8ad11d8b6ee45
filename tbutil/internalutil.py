# License: BSD3

"""
Utility functions which are meant to be used by tbutil but aren't expected
to be too useful outside of it
"""


class TbUtilException(Exception):
    """
    Base class for the errors that stop a tbutil run (bad layer names,
    unreadable or misaligned treebanks, broken trees)
    """
    def __init__(self, *args, **kw):
        super(TbUtilException, self).__init__(*args, **kw)


def nullable(value, null='_'):
    """
    Return None if `value` is missing or the CoNLL-U null marker,
    the value itself otherwise
    """
    if value is None or value == null:
        return None
    return value
