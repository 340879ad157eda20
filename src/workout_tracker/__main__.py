import sys

from workout_tracker.main import main

sys.exit(main())
