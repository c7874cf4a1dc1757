#!/usr/bin/env python3
"""Generate markdown documentation for a urfave/cli command and its subcommands.

Example:
    scripts/generate_cli_command_docs.py --output docs/app.md urfave -- app
"""

import sys

from cmd_doc.cli import main

if __name__ == "__main__":
    sys.exit(main())
