import sys

from create_next_starter.pipeline import main

sys.exit(main())
