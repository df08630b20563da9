"""Contract names, networks and the fixed bootstrap amounts (all in wei)."""

from web3 import Web3

CORN = "Corn"
CORN_DEX = "CornDEX"
LENDING = "Lending"
MOVE_PRICE = "MovePrice"

# Networks treated as disposable chains with unlimited test funds
LOCAL_NETWORKS = ("localhost",)

# First Hardhat development account, only ever used for localhost
HARDHAT_DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"

# --- Local bootstrap ---
LOCAL_NATIVE_SEED = Web3.to_wei(10000, "ether")
LOCAL_TOKEN_SEED = Web3.to_wei(10000, "ether")
LOCAL_DEX_TOKEN_AMOUNT = Web3.to_wei(1000, "ether")
LOCAL_DEX_NATIVE_AMOUNT = Web3.to_wei(1, "ether")  # 1 ETH : 1000 CORN

# --- Public bootstrap ---
# Public amounts are the local ones scaled down, keeping the DEX ratio.
PUBLIC_SCALE_DOWN = 100
PUBLIC_LENDING_SEED = LOCAL_TOKEN_SEED // PUBLIC_SCALE_DOWN  # 100 CORN
PUBLIC_DEX_TOKEN_AMOUNT = LOCAL_DEX_TOKEN_AMOUNT // PUBLIC_SCALE_DOWN  # 10 CORN
PUBLIC_DEX_NATIVE_AMOUNT = LOCAL_DEX_NATIVE_AMOUNT // PUBLIC_SCALE_DOWN  # 0.01 ETH
