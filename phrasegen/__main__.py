import sys

from phrasegen.main import main

sys.exit(main())
