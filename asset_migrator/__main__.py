import sys

from asset_migrator.main import main

sys.exit(main())
