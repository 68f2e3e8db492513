import sys

from asset_chaincode.cli import main

sys.exit(main())
