import sys

from minischeme.repl import main

sys.exit(main())
