"""Позволяет запускать приложение командой ``python -m dcon``."""

import sys

from dcon.main import main

sys.exit(main())
