import sys

from code2xml.cli import main

sys.exit(main())
