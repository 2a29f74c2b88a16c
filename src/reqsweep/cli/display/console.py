"""Rich console setup.

Provides the shared console instance used throughout the CLI display system.
"""

from __future__ import annotations

import os

from rich.console import Console

# Respect NO_COLOR environment variable for testing and accessibility
console = Console(no_color=os.environ.get("NO_COLOR") == "1")
