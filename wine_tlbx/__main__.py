import sys

from wine_tlbx.cli import main


sys.exit(main())
