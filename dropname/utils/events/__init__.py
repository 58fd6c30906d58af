"""Module: __init__.py.

Author: Michael Economou
Date: 2026-10-02

Pure Python event/signal implementation used by the controller to publish
rename results to whatever front end is listening.
"""

from dropname.utils.events.observable import Observable, Signal

__all__ = ["Observable", "Signal"]
