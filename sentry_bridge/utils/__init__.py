"""
sentry_bridge.utils
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2012 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging

from collections.abc import Sequence

logger = logging.getLogger('sentry_bridge.errors')


def merge_dicts(*dicts):
    """
    Merges mappings left to right; later keys win. Empty or None arguments
    are skipped.
    """
    out = {}
    for d in dicts:
        if not d:
            continue

        for k, v in d.items():
            out[k] = v
    return out


def is_sequence(value):
    # text is a Sequence too, but never a list of things
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)
