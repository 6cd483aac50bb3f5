import sys

from claudenv.cli import main

sys.exit(main())
