# -*- coding: utf-8 -*-
"""Builds the static news.json document from a handful of RSS searches."""

__version__ = "1.0.0"
