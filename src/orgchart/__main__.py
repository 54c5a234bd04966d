import sys

from orgchart.main import main

sys.exit(main())
