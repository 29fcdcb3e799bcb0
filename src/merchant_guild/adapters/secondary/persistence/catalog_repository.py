import json
import logging
from pathlib import Path
from typing import Optional

from ....domain.shared.catalog import Catalog
from ....domain.shared.exceptions import RecordNotFoundError
from ....ports.outbound.record_store import IRecordStore
from ....ports.outbound.repositories import ICatalogRepository
from .mappers import CatalogMapper

logger = logging.getLogger(__name__)

GOODS_KEY = "goods"
CITIES_KEY = "cities"

# Reference data shipped with the package
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class CatalogRepository(ICatalogRepository):
    """Loads goods and cities from the record store"""

    def __init__(self, store: IRecordStore):
        self._store = store

    def load_catalog(self) -> Catalog:
        goods_doc = self._store.load(GOODS_KEY)
        if goods_doc is None:
            raise RecordNotFoundError("Goods record not found")
        cities_doc = self._store.load(CITIES_KEY)
        if cities_doc is None:
            raise RecordNotFoundError("Cities record not found")

        return Catalog(
            goods=tuple(CatalogMapper.goods_from_document(goods_doc)),
            cities=tuple(CatalogMapper.cities_from_document(cities_doc)),
        )

    def seed_reference_data(self, data_dir: Optional[Path] = None) -> bool:
        """
        Store the packaged goods and cities unless both are already present.

        Args:
            data_dir: Directory holding goods.json and cities.json

        Returns:
            True if the records were written
        """
        if self._store.load(GOODS_KEY) is not None and self._store.load(CITIES_KEY) is not None:
            return False

        data_dir = data_dir or DEFAULT_DATA_DIR
        with open(data_dir / "goods.json", 'r', encoding='utf-8') as f:
            goods = json.load(f)
        with open(data_dir / "cities.json", 'r', encoding='utf-8') as f:
            cities = json.load(f)

        self._store.save(GOODS_KEY, {"goods": goods})
        self._store.save(CITIES_KEY, {"cities": cities})
        logger.info(f"Seeded reference data from {data_dir}: {len(goods)} goods, {len(cities)} cities")
        return True
