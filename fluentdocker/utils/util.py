"""
Utility functions and classes that don't depend on the rest of the fluentdocker code base.
"""

import logging
import sys
import typing as t

from rainbow_logging_handler import RainbowLoggingHandler


def iter_leafs(data: t.Dict[str, t.Any]) -> t.Iterator[t.Tuple[t.List[str], t.Any]]:
    """
    Yields the key path and the value of every leaf (a value that isn't a dict) of the passed dict tree.

    :param data: dict tree
    """
    for key, value in data.items():
        if isinstance(value, dict):
            for path, leaf in iter_leafs(value):
                yield [key] + path, leaf
        else:
            yield [key], value


def join_strs(strs: t.List[str], last_word: str = "and") -> str:
    """
    Joins the passed strings together with ", " except for the last to strings that separated by the passed word.

    :param strs: strings to join
    :param last_word: passed word that is used between the two last strings
    """
    if not isinstance(strs, list):
        strs = list(strs)
    if len(strs) == 1:
        return strs[0]
    elif len(strs) > 1:
        return " {} ".format(last_word).join([", ".join(strs[0:-1]), strs[-1]])
    return ""


class Singleton(type):
    """
    Singleton meta class.
    @see http://stackoverflow.com/a/6798042
    """
    _instances = {}
    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]


# setup `RainbowLoggingHandler`
handler = RainbowLoggingHandler(sys.stderr, color_funcName=('black', 'yellow', True))
""" Colored logging handler that is used for the root logger """
handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s"))
logging.getLogger().addHandler(handler)
