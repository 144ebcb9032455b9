import sys

from update_env.cli import main

sys.exit(main())
