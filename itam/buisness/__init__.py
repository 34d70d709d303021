"""
Domain layer for the IT asset tracker.
Contains the record stores and the rules they enforce, separated from
data persistence (models) and presentation (routes).
"""


def build_record_stores(session):
    """
    Build one store per entity around a shared database session

    Args:
        session: SQLAlchemy (scoped) session used by every store

    Returns:
        dict: URL collection name -> store
    """
    from itam.buisness.core.asset_store import AssetStore
    from itam.buisness.core.license_store import LicenseStore
    from itam.buisness.core.user_store import UserStore
    from itam.buisness.core.contract_store import ContractStore

    return {
        'assets': AssetStore(session),
        'licenses': LicenseStore(session),
        'users': UserStore(session),
        'contracts': ContractStore(session),
    }
