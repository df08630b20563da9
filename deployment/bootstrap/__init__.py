"""
Post-deploy bootstrap: funding, allowances and initial DEX liquidity.
"""

from .actions import ActionResult, BootstrapAction, Criticality, execute_actions
from .policies import BootstrapPolicy, LocalBootstrap, PublicBootstrap, select_policy

__all__ = [
    'ActionResult',
    'BootstrapAction',
    'BootstrapPolicy',
    'Criticality',
    'LocalBootstrap',
    'PublicBootstrap',
    'execute_actions',
    'select_policy',
]
