# -*- coding: utf-8 -*-
"""Persisted project schema version.

v1: browser-local documents (no _meta, no quantity/enabled, W/A sources,
    forecast without 'fetched').
v2: current; sources are watt-only.
"""

PROJECT_VERSION = 2
APP_NAME = "solsum"
