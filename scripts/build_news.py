#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Regenerates assets/news.json; run from the site root (CI workflow / cron).

import sys

from news_builder.cli import main

if __name__ == "__main__":
    sys.exit(main())
