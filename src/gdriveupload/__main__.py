import sys

from gdriveupload.cli import main

sys.exit(main())
