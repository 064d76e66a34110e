"""Dispatch strategies for replayed requests.

Each service variant is constructed with the strategy its backend requires:
direct from this process, or from inside the page for Origin-checked
endpoints.
"""

from lesson_relay._internal.dispatch.base import Dispatcher
from lesson_relay._internal.dispatch.batch import dispatch_all
from lesson_relay._internal.dispatch.direct import DirectDispatcher
from lesson_relay._internal.dispatch.page import PageContextDispatcher, PageRunner, TabLookup
from lesson_relay._internal.dispatch.playwright import PlaywrightPageRunner, PlaywrightTabLookup

__all__ = [
    "Dispatcher",
    "DirectDispatcher",
    "PageContextDispatcher",
    "PageRunner",
    "TabLookup",
    "PlaywrightPageRunner",
    "PlaywrightTabLookup",
    "dispatch_all",
]
