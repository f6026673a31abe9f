"""Caller-owned session state: conversion history and shortcut bindings."""

from .history import ConversionHistory, HistoryEntry, perform_conversion
from .shortcuts import SHORTCUTS, Shortcut, conversion_for_shortcut, resolve_shortcut, shortcut_for

__all__ = [
    "SHORTCUTS",
    "ConversionHistory",
    "HistoryEntry",
    "Shortcut",
    "conversion_for_shortcut",
    "perform_conversion",
    "resolve_shortcut",
    "shortcut_for",
]
