from __future__ import annotations

from functools import lru_cache

from ..config import csv_pattern, data_dir
from ..core.aggregation import RideDataset
from ..services.dataset_service import load_dataset


@lru_cache(maxsize=1)
def get_dataset() -> RideDataset:
    return load_dataset(data_dir(), csv_pattern())
