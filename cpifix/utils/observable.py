"""
Change notification between market objects.

An Observable keeps a weak registry of the Observers interested in it and
calls their update() method when it changes. Registration is a back
reference only: an observer never keeps the observable alive through the
registry and an observable never keeps its observers alive.

Handle is a relinkable reference to a term structure. Indices hold a Handle
rather than the curve itself so that the curve can be swapped underneath
them (clone() binds the same index description to another handle).

Example:
    >>> handle = Handle()
    >>> handle.empty()
    True
    >>> handle.link_to(zero_curve)
    >>> handle.current_link() is zero_curve
    True
"""

import logging
import weakref

from .error import UnboundCurveError

logger = logging.getLogger(__name__)

###############################################################################


class Observable:
    """ Object that notifies registered observers when it changes. """

    def _observers(self):
        # created lazily so subclasses need not call __init__
        if "_observer_set" not in self.__dict__:
            self._observer_set = weakref.WeakSet()
        return self._observer_set

    def register_observer(self, observer):
        self._observers().add(observer)

    def unregister_observer(self, observer):
        self._observers().discard(observer)

    def num_observers(self):
        return len(self._observers())

    def notify_observers(self):
        for observer in list(self._observers()):
            observer.update()

###############################################################################


class Observer:
    """ Object that is told about changes in the observables it registered
    with. """

    def register_with(self, observable):
        if isinstance(observable, Observable):
            observable.register_observer(self)

    def unregister_with(self, observable):
        if isinstance(observable, Observable):
            observable.unregister_observer(self)

    def update(self):
        if isinstance(self, Observable):
            self.notify_observers()

###############################################################################


class Handle(Observable, Observer):
    """ Relinkable, observable reference to a curve. """

    def __init__(self, curve=None):
        self._curve = None
        if curve is not None:
            self.link_to(curve)

    def empty(self):
        return self._curve is None

    def link_to(self, curve):
        """ Point the handle at a new curve and notify observers. """
        if curve is self._curve:
            return
        if self._curve is not None:
            self.unregister_with(self._curve)
        self._curve = curve
        if curve is not None:
            self.register_with(curve)
        logger.debug("Handle relinked to %s", type(curve).__name__)
        self.notify_observers()

    def current_link(self):
        if self._curve is None:
            raise UnboundCurveError()
        return self._curve

    def __repr__(self):
        if self._curve is None:
            return "Handle(empty)"
        return f"Handle({type(self._curve).__name__})"
