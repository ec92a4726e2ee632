import sys

from linux_helper.main import main

sys.exit(main())
