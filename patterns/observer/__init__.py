"""Patterns Observer - a key listener decoupled from its window"""
from .key_observer import KeyReleaseObserver, MESSAGE
