import sys

from keyed_di.main import main

sys.exit(main())
