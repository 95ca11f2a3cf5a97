"""Allow ``python -m typing_bench``."""

from .cli import main

raise SystemExit(main())
