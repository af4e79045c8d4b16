import sys

from nft_minter.cli import main

sys.exit(main())
