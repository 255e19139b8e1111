"""Domain objects for parsed slide decks."""

from .deck import Deck
from .navigator import SlideNavigator
from .slide import SlideRecord

__all__ = ['Deck', 'SlideNavigator', 'SlideRecord']
