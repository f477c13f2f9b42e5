#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
sysinfo_core.asgi
~~~~~~~~~~~~~~~~~
a diagnostics endpoint for captured host metrics

run this from uvicorn or gunicorn
"""

import os

from sysinfo_core.app import create_app

debug = os.getenv("SYSINFO_CORE_DEBUG", "False").lower() == "true"

app = create_app(debug=debug)
