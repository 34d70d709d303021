"""
Core models package for the IT asset tracker
"""

from .asset_info.asset import Asset
from .license_info.license import License
from .user_info.user import User
from .contract_info.contract import Contract

RECORD_MODELS = (Asset, License, User, Contract)

__all__ = [
    'Asset',
    'License',
    'User',
    'Contract',
    'RECORD_MODELS',
]
