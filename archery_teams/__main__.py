import sys

from archery_teams.cli import main

sys.exit(main())
