# ABOUTME: Allows running the reporter with `python -m weather_reporter`.
# ABOUTME: Delegates to cli.main and exits with its status code.

from weather_reporter.cli import main

raise SystemExit(main())
