import sys

from stylekit.app_shell.cli import main

sys.exit(main())
