"""Patterns State - NameFormatter and its controller"""
from .name_formatter import NameFormatter, NameFormatterState, InvalidNameError
from .controller import NameFormatterController
