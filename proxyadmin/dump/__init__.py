"""诊断快照采集与写出"""

from .aggregator import DumpAggregator, ProxySnapshot, SNAPSHOT_KEYS
from .writer import SnapshotWriter, dump_filename
from . import collector

__all__ = [
    "DumpAggregator",
    "ProxySnapshot",
    "SNAPSHOT_KEYS",
    "SnapshotWriter",
    "dump_filename",
    "collector",
]
