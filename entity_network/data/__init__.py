"""
PROJECT:
-------
entity-similarity-network

TITLE:
------
__init__.py (data module)

MAIN OBJECTIVE:
---------------
This script initializes the data module of the entity network, providing access to the tabular
entity source.

Dependencies:
-------------
- entity_network.data.loader

MAIN FEATURES:
--------------
1) Exports EntityLoader for CSV / DataFrame ingestion

Author:
-------
Antoine Lemor
"""

from entity_network.data.loader import EntityLoader

__all__ = [
    'EntityLoader'
]
