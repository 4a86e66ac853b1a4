import sys

from load_velocity.main import main

sys.exit(main())
