"""Patterns Visitor - walk and sound behaviors for animals"""
from .animals import Animal, Cat, Dog, AnimalVisitor, WalkVisitor, SoundVisitor
