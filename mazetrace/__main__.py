import sys

from mazetrace.main import main

sys.exit(main())
