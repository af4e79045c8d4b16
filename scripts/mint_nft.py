# scripts/mint_nft.py: mint one master-edition NFT on devnet

import sys

from nft_minter.cli import main

# ─── Usage ────────────────────────────────────────────────────────────────────
#
#   python scripts/mint_nft.py                      # wallet.keypair in cwd
#   python scripts/mint_nft.py mint --name "Cal Coin" --symbol CAL
#   python scripts/mint_nft.py show <MINT_PUBKEY>
#

if __name__ == "__main__":
    sys.exit(main())
