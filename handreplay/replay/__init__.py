"""
Hand replay module.
Turns a parsed hand into ordered snapshots with pot and stack bookkeeping.
"""

from .schemas import Pot, ReplayResult, Snapshot
from .side_pots import apply_rake, build_pots, distribute_rake
from .snapshot_builder import SnapshotBuilder, build_snapshots

__all__ = [
    'Pot',
    'ReplayResult',
    'Snapshot',
    'apply_rake',
    'build_pots',
    'distribute_rake',
    'SnapshotBuilder',
    'build_snapshots',
]
