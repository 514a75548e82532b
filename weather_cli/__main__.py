import sys

from weather_cli.infrastructure.adapters.input.cli.app import main

sys.exit(main())
