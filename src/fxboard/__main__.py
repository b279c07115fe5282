# src/fxboard/__main__.py
import sys

from fxboard.app import main

sys.exit(main())
