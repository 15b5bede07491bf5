import sys

from wiener_deblur.cli import main

sys.exit(main())
