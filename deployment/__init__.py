"""
Corn Lending Stack Deployment
=============================

Deploys and bootstraps the Corn lending stack contracts:
- Corn: ERC20 token with owner minting
- CornDEX: native/Corn constant product pool
- Lending: Corn lending market priced by CornDEX
- MovePrice: helper that trades against CornDEX to move the price
"""

__version__ = "1.0.0"
