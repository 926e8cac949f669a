"""Minimal observer pattern used to react to model changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that wants to hear about changes to a subject."""

    @abstractmethod
    def update(self, subject: Subject | None = None) -> None:
        """Called by a subject after it has changed."""


class Subject:
    """An object that notifies registered observers when it changes."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        """Register an observer; registering twice means two notifications."""
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove every registration of the observer, if any."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        """Tell every registered observer that this subject changed."""
        for observer in list(self._observers):
            observer.update(self)